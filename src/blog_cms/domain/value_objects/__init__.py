"""值对象"""

from .article import ArticleStatus, Content, Slug, Timestamps, Title
from .author import AuthorBio, AuthorEmail, AuthorName
from .base import SelfValidating, Validated
from .category import CategoryName, CategorySlug, Description, Order
from .identifiers import ArticleId, AuthorId, CategoryId, CommentId
from .listing import ArticleCriteria, Page, SortOrder
from .review import EditorialComment, ReviewDecision, ReviewOutcome

__all__ = [
    # 基础
    "SelfValidating",
    "Validated",
    # 标识
    "ArticleId",
    "AuthorId",
    "CategoryId",
    "CommentId",
    # 文章
    "Title",
    "Content",
    "Slug",
    "ArticleStatus",
    "Timestamps",
    # 审核
    "ReviewOutcome",
    "ReviewDecision",
    "EditorialComment",
    # 作者
    "AuthorName",
    "AuthorEmail",
    "AuthorBio",
    # 分类
    "CategoryName",
    "CategorySlug",
    "Description",
    "Order",
    # 列表
    "ArticleCriteria",
    "SortOrder",
    "Page",
]
