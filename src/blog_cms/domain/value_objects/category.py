"""分类相关值对象"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...shared.constants import (
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    CATEGORY_SLUG_MIN_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    ORDER_MAX_VALUE,
    SLUG_MAX_LENGTH,
)
from ...shared.exceptions import InvalidValueError
from .base import SelfValidating, require_length, require_text

_CATEGORY_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


@dataclass(frozen=True)
class CategoryName(SelfValidating):
    """分类名称（2-100 个字符）"""

    value: str

    def __post_init__(self) -> None:
        stripped = require_text(self.value, "分类名称")
        require_length(stripped, "分类名称", CATEGORY_NAME_MIN_LENGTH, CATEGORY_NAME_MAX_LENGTH)
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategorySlug(SelfValidating):
    """分类 slug（小写字母、数字与连字符，3-250 个字符）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidValueError("分类 slug 不能为空")
        require_length(self.value, "分类 slug", CATEGORY_SLUG_MIN_LENGTH, SLUG_MAX_LENGTH)
        if not _CATEGORY_SLUG_PATTERN.match(self.value):
            raise InvalidValueError(f"分类 slug 格式无效: {self.value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Description(SelfValidating):
    """分类描述；空白描述规范化为 None"""

    value: str | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        if not isinstance(self.value, str):
            raise InvalidValueError("描述必须是字符串")
        stripped = self.value.strip()
        if len(stripped) > DESCRIPTION_MAX_LENGTH:
            raise InvalidValueError(f"描述不能超过 {DESCRIPTION_MAX_LENGTH} 个字符")
        object.__setattr__(self, "value", stripped or None)

    @property
    def is_empty(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Order(SelfValidating):
    """排序值（0-999999）"""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValueError("排序值必须是整数")
        if not 0 <= self.value <= ORDER_MAX_VALUE:
            raise InvalidValueError(f"排序值必须在 0 到 {ORDER_MAX_VALUE} 之间")

    def __int__(self) -> int:
        return self.value
