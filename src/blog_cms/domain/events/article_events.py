"""文章领域事件"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import DomainEvent


@dataclass(frozen=True)
class ArticleCreated(DomainEvent):
    """文章创建事件（草稿）"""

    name = "article.created"
    occurred_field = "created_at"

    article_id: str
    title: str
    content: str
    slug: str
    status: str
    author_id: str
    created_at: datetime


@dataclass(frozen=True)
class ArticleUpdated(DomainEvent):
    """文章更新事件，changed_fields 为实际变化的字段"""

    name = "article.updated"
    occurred_field = "updated_at"

    article_id: str
    title: str
    content: str
    slug: str
    changed_fields: tuple[str, ...]
    updated_at: datetime


@dataclass(frozen=True)
class ArticleSubmittedForReview(DomainEvent):
    """文章提交审核事件"""

    name = "article.submitted_for_review"
    occurred_field = "submitted_at"

    article_id: str
    title: str
    author_id: str
    submitted_at: datetime


@dataclass(frozen=True)
class ArticleApproved(DomainEvent):
    """文章审核通过事件"""

    name = "article.approved"
    occurred_field = "reviewed_at"

    article_id: str
    reviewer_id: str
    reason: str | None
    reviewed_at: datetime


@dataclass(frozen=True)
class ArticleRejected(DomainEvent):
    """文章驳回事件"""

    name = "article.rejected"
    occurred_field = "reviewed_at"

    article_id: str
    reviewer_id: str
    reason: str
    reviewed_at: datetime


@dataclass(frozen=True)
class ArticlePublished(DomainEvent):
    """文章发布事件"""

    name = "article.published"
    occurred_field = "published_at"

    article_id: str
    title: str
    slug: str
    author_id: str
    published_at: datetime


@dataclass(frozen=True)
class ArticleDeleted(DomainEvent):
    """文章删除事件（墓碑）"""

    name = "article.deleted"
    occurred_field = "deleted_at"

    article_id: str
    slug: str
    deleted_by: str | None
    deleted_at: datetime


@dataclass(frozen=True)
class EditorialCommentAdded(DomainEvent):
    """编辑评论添加事件"""

    name = "article.editorial_comment_added"
    occurred_field = "created_at"

    comment_id: str
    article_id: str
    reviewer_id: str
    comment: str
    created_at: datetime
