"""作者相关值对象"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...shared.constants import (
    AUTHOR_BIO_MAX_LENGTH,
    AUTHOR_EMAIL_MAX_LENGTH,
    AUTHOR_NAME_MAX_LENGTH,
    AUTHOR_NAME_MIN_LENGTH,
)
from ...shared.exceptions import InvalidValueError
from .base import SelfValidating, require_length, require_text

_NAME_PATTERN = re.compile(r"^[\w\s\-'.]+$")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class AuthorName(SelfValidating):
    """作者姓名（2-100 个字符，允许字母、空格、连字符、撇号与点）"""

    value: str

    def __post_init__(self) -> None:
        stripped = require_text(self.value, "作者姓名")
        require_length(stripped, "作者姓名", AUTHOR_NAME_MIN_LENGTH, AUTHOR_NAME_MAX_LENGTH)
        if not _NAME_PATTERN.match(stripped):
            raise InvalidValueError(f"作者姓名包含非法字符: {stripped}")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuthorEmail(SelfValidating):
    """作者邮箱，统一转为小写"""

    value: str

    def __post_init__(self) -> None:
        normalized = require_text(self.value, "邮箱").lower()
        if len(normalized) > AUTHOR_EMAIL_MAX_LENGTH:
            raise InvalidValueError(f"邮箱不能超过 {AUTHOR_EMAIL_MAX_LENGTH} 个字符")
        if not _EMAIL_PATTERN.match(normalized):
            raise InvalidValueError(f"邮箱格式无效: {normalized}")
        object.__setattr__(self, "value", normalized)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuthorBio(SelfValidating):
    """作者简介，可以为空"""

    value: str = ""

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", "")
        if not isinstance(self.value, str):
            raise InvalidValueError("作者简介必须是字符串")
        stripped = self.value.strip()
        if len(stripped) > AUTHOR_BIO_MAX_LENGTH:
            raise InvalidValueError(f"作者简介不能超过 {AUTHOR_BIO_MAX_LENGTH} 个字符")
        object.__setattr__(self, "value", stripped)

    @property
    def is_empty(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return self.value
