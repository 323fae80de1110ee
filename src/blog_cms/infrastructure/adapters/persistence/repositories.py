"""基于 JsonDocumentStore 的仓储实现"""

from __future__ import annotations

from ....domain.entities import Article, ArticleComment, Author, Category
from ....domain.value_objects import ArticleCriteria, ArticleId, AuthorId, CategoryId, Page
from ....shared.exceptions import (
    AuthorAlreadyExistsError,
    CategoryAlreadyExistsError,
    SlugAlreadyExistsError,
)
from .json_store import JsonDocumentStore
from .mappers import (
    article_to_record,
    author_to_record,
    category_to_record,
    comment_to_record,
    record_to_article,
    record_to_author,
    record_to_category,
    record_to_comment,
)

ARTICLES = "articles"
AUTHORS = "authors"
CATEGORIES = "categories"
COMMENTS = "comments"


class JsonArticleRepository:
    """文章仓储；删除文章时一并删除其编辑评论"""

    def __init__(self, store: JsonDocumentStore):
        self._store = store

    def find_by_id(self, article_id: ArticleId) -> Article | None:
        record = self._store.get(ARTICLES, article_id.value)
        return record_to_article(record) if record else None

    def find_by_slug(self, slug: str) -> Article | None:
        for record in self._store.values(ARTICLES):
            if record.get("slug") == slug:
                return record_to_article(record)
        return None

    def exists_with_slug(self, slug: str) -> bool:
        return any(record.get("slug") == slug for record in self._store.values(ARTICLES))

    def save(self, article: Article) -> None:
        """
        Raises:
            SlugAlreadyExistsError: slug 已被另一篇文章占用
        """
        owner = self.find_by_slug(article.slug.value)
        if owner is not None and owner.id != article.id:
            raise SlugAlreadyExistsError(article.slug.value)
        self._store.put(ARTICLES, article.id.value, article_to_record(article))

    def remove(self, article_id: ArticleId) -> None:
        self._store.delete(ARTICLES, article_id.value)
        self._store.delete_where(COMMENTS, "article_id", article_id.value)

    def find_all(self) -> list[Article]:
        return [record_to_article(record) for record in self._store.values(ARTICLES)]

    def find_all_paginated(self, criteria: ArticleCriteria) -> Page[Article]:
        return criteria.apply(self.find_all())


class JsonAuthorRepository:
    """作者仓储；邮箱唯一"""

    def __init__(self, store: JsonDocumentStore):
        self._store = store

    def find_by_id(self, author_id: AuthorId) -> Author | None:
        record = self._store.get(AUTHORS, author_id.value)
        return record_to_author(record) if record else None

    def find_by_email(self, email: str) -> Author | None:
        email = email.strip().lower()
        for record in self._store.values(AUTHORS):
            if record.get("email") == email:
                return record_to_author(record)
        return None

    def add(self, author: Author) -> None:
        self._check_email(author)
        self._store.put(AUTHORS, author.id.value, author_to_record(author))

    def update(self, author: Author) -> None:
        self._check_email(author)
        self._store.put(AUTHORS, author.id.value, author_to_record(author))

    def remove(self, author_id: AuthorId) -> None:
        self._store.delete(AUTHORS, author_id.value)

    def count_articles_by_author_id(self, author_id: AuthorId) -> int:
        return sum(
            1 for record in self._store.values(ARTICLES) if record.get("author_id") == author_id.value
        )

    def find_all_paginated(self, page: int, limit: int) -> Page[Author]:
        authors = [record_to_author(record) for record in self._store.values(AUTHORS)]
        authors.sort(key=lambda author: author.created_at, reverse=True)
        offset = (page - 1) * limit
        return Page(items=authors[offset : offset + limit], total=len(authors), page=page, limit=limit)

    def _check_email(self, author: Author) -> None:
        owner = self.find_by_email(author.email.value)
        if owner is not None and owner.id != author.id:
            raise AuthorAlreadyExistsError(author.email.value)


class JsonCategoryRepository:
    """分类仓储；slug 唯一"""

    def __init__(self, store: JsonDocumentStore):
        self._store = store

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        record = self._store.get(CATEGORIES, category_id.value)
        return record_to_category(record) if record else None

    def find_by_slug(self, slug: str) -> Category | None:
        for record in self._store.values(CATEGORIES):
            if record.get("slug") == slug:
                return record_to_category(record)
        return None

    def exists_by_slug(self, slug: str) -> bool:
        return self.find_by_slug(slug) is not None

    def find_by_parent_id(self, parent_id: CategoryId | None) -> list[Category]:
        wanted = parent_id.value if parent_id else None
        return [
            record_to_category(record)
            for record in self._store.values(CATEGORIES)
            if record.get("parent_id") == wanted
        ]

    def find_all(self) -> list[Category]:
        return [record_to_category(record) for record in self._store.values(CATEGORIES)]

    def save(self, category: Category) -> None:
        owner = self.find_by_slug(category.slug.value)
        if owner is not None and owner.id != category.id:
            raise CategoryAlreadyExistsError(category.slug.value)
        self._store.put(CATEGORIES, category.id.value, category_to_record(category))

    def remove(self, category_id: CategoryId) -> None:
        self._store.delete(CATEGORIES, category_id.value)


class JsonEditorialCommentRepository:
    def __init__(self, store: JsonDocumentStore):
        self._store = store

    def add(self, comment: ArticleComment) -> None:
        self._store.put(COMMENTS, comment.id.value, comment_to_record(comment))

    def find_by_article_id(self, article_id: ArticleId) -> list[ArticleComment]:
        comments = [
            record_to_comment(record)
            for record in self._store.values(COMMENTS)
            if record.get("article_id") == article_id.value
        ]
        comments.sort(key=lambda comment: comment.created_at)
        return comments
