"""分类查询"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...domain.value_objects import CategoryId
from ...shared.constants import DEFAULT_TREE_MAX_DEPTH
from ...shared.exceptions import CategoryNotFoundError, InvalidValueError

if TYPE_CHECKING:
    from ...domain.entities import Category
    from ...domain.repositories import CategoryRepository
    from ...domain.services import CategoryNode, CategoryTreeBuilder


@dataclass(frozen=True)
class GetCategoryQuery:
    category_id: str


@dataclass(frozen=True)
class ListCategoriesQuery:
    """parent_id 为 None 时列出全部分类；roots_only 只列出根分类"""

    parent_id: str | None = None
    roots_only: bool = False


@dataclass(frozen=True)
class GetCategoryTreeQuery:
    root_id: str | None = None
    max_depth: int = DEFAULT_TREE_MAX_DEPTH


class GetCategoryHandler:
    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def handle(self, query: GetCategoryQuery) -> Category:
        category = self._categories.find_by_id(CategoryId(query.category_id))
        if category is None:
            raise CategoryNotFoundError(query.category_id)
        return category


class ListCategoriesHandler:
    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def handle(self, query: ListCategoriesQuery) -> list[Category]:
        if query.parent_id:
            categories = self._categories.find_by_parent_id(CategoryId(query.parent_id))
        elif query.roots_only:
            categories = self._categories.find_by_parent_id(None)
        else:
            categories = self._categories.find_all()
        return sorted(categories, key=lambda c: (c.order.value, c.name.value))


class GetCategoryTreeHandler:
    def __init__(self, tree_builder: CategoryTreeBuilder):
        self._tree_builder = tree_builder

    def handle(self, query: GetCategoryTreeQuery) -> list[CategoryNode]:
        if query.max_depth < 1:
            raise InvalidValueError("树的最大深度必须至少为 1")
        root_id = CategoryId(query.root_id) if query.root_id else None
        return self._tree_builder.build(root_id, query.max_depth)
