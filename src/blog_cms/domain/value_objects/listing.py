"""列表查询条件与分页结果值对象"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...shared.constants import ARTICLE_SORT_FIELDS, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ...shared.exceptions import InvalidValueError
from .article import ArticleStatus
from .base import SelfValidating

if TYPE_CHECKING:
    from ..entities.article import Article

T = TypeVar("T")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class ArticleCriteria(SelfValidating):
    """
    文章列表查询条件

    所有筛选条件之间是 AND 关系。

    Attributes:
        page: 页码（从 1 开始）
        limit: 每页数量（1-100）
        status: 按状态筛选
        author_id: 按作者筛选
        search: 标题或正文包含的关键词（不区分大小写）
        sort_by: 排序字段 (createdAt, updatedAt, publishedAt, title)
        order: 排序方向
    """

    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    status: ArticleStatus | None = None
    author_id: str | None = None
    search: str | None = None
    sort_by: str = "createdAt"
    order: SortOrder | str = SortOrder.DESC

    def __post_init__(self) -> None:
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise InvalidValueError("页码必须是整数")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidValueError("每页数量必须是整数")
        if self.page < 1:
            raise InvalidValueError("页码必须大于 0")
        if not 1 <= self.limit <= MAX_PAGE_LIMIT:
            raise InvalidValueError(f"每页数量必须在 1 到 {MAX_PAGE_LIMIT} 之间")
        if self.sort_by not in ARTICLE_SORT_FIELDS:
            raise InvalidValueError(
                f"无效的排序字段: {self.sort_by}（可选: {', '.join(ARTICLE_SORT_FIELDS)}）"
            )
        if not isinstance(self.order, SortOrder):
            try:
                object.__setattr__(self, "order", SortOrder(str(self.order).upper()))
            except ValueError as e:
                raise InvalidValueError(f"无效的排序方向: {self.order}") from e
        if self.search is not None:
            object.__setattr__(self, "search", self.search.strip() or None)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def matches(self, article: Article) -> bool:
        """判断文章是否满足筛选条件"""
        if self.status is not None and article.status is not self.status:
            return False
        if self.author_id is not None and str(article.author_id) != self.author_id:
            return False
        if self.search:
            keyword = self.search.lower()
            if (
                keyword not in article.title.value.lower()
                and keyword not in article.content.value.lower()
            ):
                return False
        return True

    def sort_key(self, article: Article) -> Any:
        """排序键；未发布文章的 publishedAt 视为最早"""
        if self.sort_by == "title":
            return article.title.value.lower()
        if self.sort_by == "updatedAt":
            return article.timestamps.updated_at
        if self.sort_by == "publishedAt":
            return article.published_at or _EPOCH
        return article.timestamps.created_at

    def apply(self, articles: list[Article]) -> Page[Article]:
        """在内存中筛选、排序并分页"""
        matched = [article for article in articles if self.matches(article)]
        matched.sort(key=self.sort_key, reverse=self.order is SortOrder.DESC)
        return Page(
            items=matched[self.offset : self.offset + self.limit],
            total=len(matched),
            page=self.page,
            limit=self.limit,
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """分页结果"""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT

    @property
    def pages(self) -> int:
        """总页数"""
        return (self.total + self.limit - 1) // self.limit if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    def __len__(self) -> int:
        return len(self.items)
