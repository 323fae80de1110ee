"""文章聚合根快照"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ...shared.exceptions import InvalidValueError
from ..value_objects import (
    ArticleId,
    ArticleStatus,
    AuthorId,
    Content,
    Slug,
    Timestamps,
    Title,
)


@dataclass(frozen=True)
class Article:
    """
    文章聚合根（不可变快照）

    状态流转只能由领域服务（提交、审核、发布等）产生新的快照，
    任何操作都不会就地修改现有快照。

    不变式：
    - published_at 在状态为 PUBLISHED 时必须存在；
      除 PUBLISHED 与 ARCHIVED 外的状态不能带有 published_at
    - published_at 不早于创建时间
    """

    id: ArticleId
    title: Title
    content: Content
    slug: Slug
    status: ArticleStatus
    author_id: AuthorId
    timestamps: Timestamps
    published_at: datetime | None = None

    # 审核信息
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    reviewer_id: str | None = None
    review_reason: str | None = None

    def __post_init__(self) -> None:
        if self.status is ArticleStatus.PUBLISHED and self.published_at is None:
            raise InvalidValueError("已发布的文章必须有发布时间")
        if self.published_at is not None:
            if self.status not in (ArticleStatus.PUBLISHED, ArticleStatus.ARCHIVED):
                raise InvalidValueError(f"状态为 {self.status.value} 的文章不能有发布时间")
            if self.published_at < self.timestamps.created_at:
                raise InvalidValueError("发布时间不能早于创建时间")

    def evolve(self, **changes: Any) -> Article:
        """返回应用了变更的新快照（会重新校验不变式）"""
        return replace(self, **changes)

    @property
    def created_at(self) -> datetime:
        return self.timestamps.created_at

    @property
    def updated_at(self) -> datetime:
        return self.timestamps.updated_at

    @property
    def is_published(self) -> bool:
        return self.status is ArticleStatus.PUBLISHED

    @property
    def word_count(self) -> int:
        return self.content.word_count

    @property
    def excerpt(self) -> str:
        return self.content.excerpt()
