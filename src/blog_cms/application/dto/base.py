"""网关请求/响应的基础类型"""

from __future__ import annotations

import re
from dataclasses import MISSING, asdict, dataclass, fields
from typing import Any, ClassVar, TypeVar

from ...domain.value_objects import Validated
from ...shared.exceptions import ValidationError

R = TypeVar("R", bound="GatewayRequest")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake(key: str) -> str:
    """authorId -> author_id"""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class GatewayRequest:
    """
    网关请求

    只包含原始类型字段。构造时检查 REQUIRED 中的字段不为空白，
    validate() 借助值对象的智能构造函数收集全部违规项，
    由 Validation 中间件统一报告。
    """

    REQUIRED: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        blank = [name for name in self.REQUIRED if _is_blank(getattr(self, name))]
        if blank:
            raise ValidationError(violations=[f"{name} 不能为空" for name in blank])

    @classmethod
    def from_data(cls: type[R], data: dict[str, Any]) -> R:
        """从字典构造请求，键可以是 snake_case 或 camelCase；未知键被忽略"""
        normalized = {to_snake(key): value for key, value in data.items()}
        kwargs: dict[str, Any] = {}
        missing: list[str] = []
        for item in fields(cls):
            if item.name in normalized:
                kwargs[item.name] = normalized[item.name]
            elif item.default is MISSING and item.default_factory is MISSING:
                missing.append(item.name)
        if missing:
            raise ValidationError(violations=[f"缺少字段: {name}" for name in missing])
        return cls(**kwargs)

    def data(self) -> dict[str, Any]:
        """请求内容（用于日志）"""
        return asdict(self)

    def validate(self) -> list[str]:
        """返回全部违规描述；空列表表示通过"""
        return []


def collect_violations(*results: Validated[Any] | None) -> list[str]:
    """汇总智能构造结果中的失败原因；None 表示该字段未提供，跳过"""
    return [result.error for result in results if result is not None and result.error is not None]


@dataclass(frozen=True)
class GatewayResponse:
    """网关响应：只包含可序列化的原始类型，时间为 ISO-8601 字符串"""

    def data(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeletionResponse(GatewayResponse):
    """删除结果"""

    id: str
    deleted_at: str
    slug: str | None = None
