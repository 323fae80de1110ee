"""聚合标识值对象

标识本身不负责生成，新标识由注入的 IdGenerator 端口提供。
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from ...shared.exceptions import InvalidValueError
from .base import SelfValidating


@dataclass(frozen=True)
class _UuidIdentifier(SelfValidating):
    """UUID 字符串标识，统一规范化为小写的标准格式"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueError(f"{self.__class__.__name__} 不能为空")
        try:
            normalized = str(uuid.UUID(self.value.strip()))
        except ValueError as e:
            raise InvalidValueError(
                f"{self.__class__.__name__} 不是有效的 UUID: {self.value}"
            ) from e
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ArticleId(_UuidIdentifier):
    """文章标识"""


@dataclass(frozen=True)
class AuthorId(_UuidIdentifier):
    """作者标识"""


@dataclass(frozen=True)
class CategoryId(_UuidIdentifier):
    """分类标识"""


@dataclass(frozen=True)
class CommentId(_UuidIdentifier):
    """编辑评论标识"""
