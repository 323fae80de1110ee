"""领域事件"""

from .article_events import (
    ArticleApproved,
    ArticleCreated,
    ArticleDeleted,
    ArticlePublished,
    ArticleRejected,
    ArticleSubmittedForReview,
    ArticleUpdated,
    EditorialCommentAdded,
)
from .author_events import AuthorCreated, AuthorDeleted, AuthorUpdated
from .base import DomainEvent, Outcome
from .category_events import CategoryCreated, CategoryDeleted, CategoryUpdated

__all__ = [
    "DomainEvent",
    "Outcome",
    # 文章
    "ArticleCreated",
    "ArticleUpdated",
    "ArticleSubmittedForReview",
    "ArticleApproved",
    "ArticleRejected",
    "ArticlePublished",
    "ArticleDeleted",
    "EditorialCommentAdded",
    # 作者
    "AuthorCreated",
    "AuthorUpdated",
    "AuthorDeleted",
    # 分类
    "CategoryCreated",
    "CategoryUpdated",
    "CategoryDeleted",
]
