"""作者查询"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...domain.value_objects import ArticleCriteria, AuthorId, Page
from ...shared.constants import DEFAULT_PAGE_LIMIT
from ...shared.exceptions import AuthorNotFoundError

if TYPE_CHECKING:
    from ...domain.entities import Article, Author
    from ...domain.repositories import ArticleRepository, AuthorRepository


@dataclass(frozen=True)
class GetAuthorQuery:
    author_id: str


@dataclass(frozen=True)
class ListAuthorsQuery:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT


@dataclass(frozen=True)
class GetAuthorArticlesQuery:
    author_id: str
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT


class GetAuthorHandler:
    def __init__(self, authors: AuthorRepository):
        self._authors = authors

    def handle(self, query: GetAuthorQuery) -> Author:
        author = self._authors.find_by_id(AuthorId(query.author_id))
        if author is None:
            raise AuthorNotFoundError(query.author_id)
        return author


class ListAuthorsHandler:
    def __init__(self, authors: AuthorRepository):
        self._authors = authors

    def handle(self, query: ListAuthorsQuery) -> Page[Author]:
        # 复用文章查询条件的分页校验
        ArticleCriteria(page=query.page, limit=query.limit)
        return self._authors.find_all_paginated(query.page, query.limit)


class GetAuthorArticlesHandler:
    """列出作者的文章；作者不存在时报错"""

    def __init__(self, authors: AuthorRepository, articles: ArticleRepository):
        self._authors = authors
        self._articles = articles

    def handle(self, query: GetAuthorArticlesQuery) -> Page[Article]:
        author_id = AuthorId(query.author_id)
        if self._authors.find_by_id(author_id) is None:
            raise AuthorNotFoundError(query.author_id)
        criteria = ArticleCriteria(page=query.page, limit=query.limit, author_id=author_id.value)
        return self._articles.find_all_paginated(criteria)
