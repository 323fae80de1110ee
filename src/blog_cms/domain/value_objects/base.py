"""值对象基础设施

值对象在构造时自校验：直接构造失败会抛出 InvalidValueError；
parse() 是对应的智能构造函数，把失败作为返回值交给调用方。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ...shared.exceptions import InvalidValueError

T = TypeVar("T")
V = TypeVar("V", bound="SelfValidating")


@dataclass(frozen=True)
class Validated(Generic[T]):
    """智能构造的结果：成功时携带值，失败时携带原因"""

    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> Validated[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> Validated[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """取出值；失败时抛出 InvalidValueError"""
        if self.error is not None:
            raise InvalidValueError(self.error)
        return self.value  # type: ignore[return-value]


class SelfValidating:
    """自校验值对象的混入类"""

    @classmethod
    def parse(cls: type[V], *args: Any, **kwargs: Any) -> Validated[V]:
        """智能构造函数：校验失败时返回 failure 而不是抛出异常"""
        try:
            return Validated.success(cls(*args, **kwargs))
        except InvalidValueError as e:
            return Validated.failure(e.user_message)


def require_text(value: Any, field_name: str) -> str:
    """校验为非空字符串并返回去除首尾空白后的值"""
    if not isinstance(value, str):
        raise InvalidValueError(f"{field_name}必须是字符串")
    stripped = value.strip()
    if not stripped:
        raise InvalidValueError(f"{field_name}不能为空")
    return stripped


def require_length(value: str, field_name: str, min_length: int, max_length: int) -> None:
    """校验字符串长度区间"""
    if len(value) < min_length:
        raise InvalidValueError(f"{field_name}至少需要 {min_length} 个字符")
    if len(value) > max_length:
        raise InvalidValueError(f"{field_name}不能超过 {max_length} 个字符")
