"""仓储协议 - 定义持久化适配器必须实现的接口

领域服务只读取仓储（存在性与唯一性检查），写入由应用层处理器负责。
唯一约束冲突与未找到由实现方以对应的领域异常抛出，核心不做重试。
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .entities import Article, ArticleComment, Author, Category
from .value_objects import ArticleCriteria, ArticleId, AuthorId, CategoryId, Page


@runtime_checkable
class ArticleRepository(Protocol):
    """文章仓储"""

    def find_by_id(self, article_id: ArticleId) -> Article | None:
        """
        获取文章

        Args:
            article_id: 文章ID

        Returns:
            文章快照，不存在返回None
        """
        ...

    def find_by_slug(self, slug: str) -> Article | None:
        """通过 slug 获取文章"""
        ...

    def exists_with_slug(self, slug: str) -> bool:
        """检查 slug 是否已被文章占用"""
        ...

    def save(self, article: Article) -> None:
        """
        保存文章（新增或覆盖）

        Raises:
            StorageError: 保存失败
        """
        ...

    def remove(self, article_id: ArticleId) -> None:
        """删除文章"""
        ...

    def find_all_paginated(self, criteria: ArticleCriteria) -> Page[Article]:
        """按条件分页查询"""
        ...


@runtime_checkable
class AuthorRepository(Protocol):
    """作者仓储"""

    def find_by_id(self, author_id: AuthorId) -> Author | None:
        ...

    def find_by_email(self, email: str) -> Author | None:
        ...

    def add(self, author: Author) -> None:
        ...

    def update(self, author: Author) -> None:
        ...

    def remove(self, author_id: AuthorId) -> None:
        ...

    def count_articles_by_author_id(self, author_id: AuthorId) -> int:
        """统计引用该作者的文章数量"""
        ...

    def find_all_paginated(self, page: int, limit: int) -> Page[Author]:
        ...


@runtime_checkable
class CategoryRepository(Protocol):
    """分类仓储"""

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        ...

    def find_by_slug(self, slug: str) -> Category | None:
        ...

    def exists_by_slug(self, slug: str) -> bool:
        ...

    def find_by_parent_id(self, parent_id: CategoryId | None) -> list[Category]:
        """获取直接子分类；parent_id 为 None 时返回根分类"""
        ...

    def find_all(self) -> list[Category]:
        ...

    def save(self, category: Category) -> None:
        ...

    def remove(self, category_id: CategoryId) -> None:
        ...


@runtime_checkable
class EditorialCommentRepository(Protocol):
    """编辑评论仓储"""

    def add(self, comment: ArticleComment) -> None:
        ...

    def find_by_article_id(self, article_id: ArticleId) -> list[ArticleComment]:
        """按创建时间升序返回文章的全部评论"""
        ...
