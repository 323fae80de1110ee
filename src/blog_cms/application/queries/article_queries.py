"""文章查询"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...domain.value_objects import ArticleCriteria, ArticleId, ArticleStatus, AuthorId, Page
from ...shared.constants import DEFAULT_PAGE_LIMIT
from ...shared.exceptions import ArticleNotFoundError

if TYPE_CHECKING:
    from ...domain.entities import Article, ArticleComment
    from ...domain.repositories import ArticleRepository, EditorialCommentRepository


@dataclass(frozen=True)
class GetArticleQuery:
    article_id: str


@dataclass(frozen=True)
class ListArticlesQuery:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    status: str | None = None
    author_id: str | None = None
    search: str | None = None
    sort_by: str = "createdAt"
    order: str = "DESC"


@dataclass(frozen=True)
class ListEditorialCommentsQuery:
    article_id: str


class GetArticleHandler:
    def __init__(self, articles: ArticleRepository):
        self._articles = articles

    def handle(self, query: GetArticleQuery) -> Article:
        article = self._articles.find_by_id(ArticleId(query.article_id))
        if article is None:
            raise ArticleNotFoundError(query.article_id)
        return article


class ListArticlesHandler:
    """按条件分页列出文章"""

    def __init__(self, articles: ArticleRepository):
        self._articles = articles

    def handle(self, query: ListArticlesQuery) -> Page[Article]:
        criteria = ArticleCriteria(
            page=query.page,
            limit=query.limit,
            status=ArticleStatus.from_string(query.status) if query.status else None,
            author_id=AuthorId(query.author_id).value if query.author_id else None,
            search=query.search,
            sort_by=query.sort_by,
            order=query.order,
        )
        return self._articles.find_all_paginated(criteria)


class ListEditorialCommentsHandler:
    def __init__(self, articles: ArticleRepository, comments: EditorialCommentRepository):
        self._articles = articles
        self._comments = comments

    def handle(self, query: ListEditorialCommentsQuery) -> list[ArticleComment]:
        article_id = ArticleId(query.article_id)
        if self._articles.find_by_id(article_id) is None:
            raise ArticleNotFoundError(query.article_id)
        return self._comments.find_by_article_id(article_id)
