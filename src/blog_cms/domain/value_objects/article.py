"""文章相关值对象"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bs4 import BeautifulSoup

from ...shared.constants import (
    EXCERPT_LENGTH,
    SLUG_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from ...shared.exceptions import InvalidValueError
from ...shared.utils import clean_whitespace, count_words, truncate_text
from .base import SelfValidating, require_length, require_text

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@dataclass(frozen=True)
class Title(SelfValidating):
    """文章标题（去除首尾空白，5-200 个字符）"""

    value: str

    def __post_init__(self) -> None:
        stripped = require_text(self.value, "标题")
        require_length(stripped, "标题", TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Content(SelfValidating):
    """
    文章正文值对象

    正文可以是纯文本或 HTML，原样保存；纯文本视图、字数与摘要
    通过 BeautifulSoup 从正文中提取。
    """

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "正文")

    @property
    def plain_text(self) -> str:
        """去除标签后的纯文本"""
        soup = BeautifulSoup(self.value, "html.parser")
        for tag in soup(["script", "style"]):
            tag.decompose()
        return clean_whitespace(soup.get_text(separator=" "))

    @property
    def word_count(self) -> int:
        """字数统计"""
        return count_words(self.plain_text)

    def excerpt(self, length: int = EXCERPT_LENGTH) -> str:
        """正文摘要"""
        return truncate_text(self.plain_text, length)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Slug(SelfValidating):
    """URL 安全的 slug：小写字母数字，以单个连字符分隔"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidValueError("slug 不能为空")
        if len(self.value) > SLUG_MAX_LENGTH:
            raise InvalidValueError(f"slug 不能超过 {SLUG_MAX_LENGTH} 个字符")
        if not _SLUG_PATTERN.match(self.value):
            raise InvalidValueError(f"slug 格式无效: {self.value}")

    def __str__(self) -> str:
        return self.value


class ArticleStatus(str, Enum):
    """文章状态"""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def from_string(cls, value: str) -> ArticleStatus:
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            valid = ", ".join(status.value for status in cls)
            raise InvalidValueError(f"无效的文章状态: {value}（可选: {valid}）") from e

    @property
    def label(self) -> str:
        """中文名称"""
        return _STATUS_LABELS[self]

    def can_be_submitted_for_review(self) -> bool:
        return self in (ArticleStatus.DRAFT, ArticleStatus.REJECTED)

    def can_be_reviewed(self) -> bool:
        return self is ArticleStatus.PENDING_REVIEW

    def can_be_published(self) -> bool:
        return self is ArticleStatus.APPROVED


_STATUS_LABELS = {
    ArticleStatus.DRAFT: "草稿",
    ArticleStatus.PENDING_REVIEW: "待审核",
    ArticleStatus.APPROVED: "已通过",
    ArticleStatus.REJECTED: "已驳回",
    ArticleStatus.PUBLISHED: "已发布",
    ArticleStatus.ARCHIVED: "已归档",
}


@dataclass(frozen=True)
class Timestamps(SelfValidating):
    """创建/更新时间对，保证 updated_at ≥ created_at"""

    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.created_at, datetime) or not isinstance(self.updated_at, datetime):
            raise InvalidValueError("时间戳必须是 datetime")
        if self.updated_at < self.created_at:
            raise InvalidValueError("更新时间不能早于创建时间")

    @classmethod
    def create(cls, at: datetime) -> Timestamps:
        return cls(created_at=at, updated_at=at)

    def touched(self, at: datetime) -> Timestamps:
        """返回更新了 updated_at 的新时间戳（不会早于现有值）"""
        return Timestamps(self.created_at, max(self.updated_at, at))
