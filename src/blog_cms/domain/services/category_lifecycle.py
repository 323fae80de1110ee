"""分类生命周期领域服务"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Final

from ...shared.exceptions import (
    CategoryAlreadyExistsError,
    CategoryCycleError,
    CategoryHasChildrenError,
    ParentCategoryNotFoundError,
    SlugAlreadyExistsError,
)
from ..entities import Category
from ..events import CategoryCreated, CategoryDeleted, CategoryUpdated, Outcome
from ..value_objects import (
    CategoryId,
    CategoryName,
    CategorySlug,
    Description,
    Order,
    Timestamps,
)

if TYPE_CHECKING:
    from ..repositories import CategoryRepository


class _Unchanged:
    def __repr__(self) -> str:
        return "UNCHANGED"


# 更新时表示“不修改父分类”；None 表示移到根
UNCHANGED: Final = _Unchanged()


class CategoryCreator:
    """创建分类：slug 唯一，父分类必须存在"""

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def create(
        self,
        category_id: CategoryId,
        name: CategoryName,
        slug: CategorySlug,
        at: datetime,
        description: Description | None = None,
        parent_id: CategoryId | None = None,
        order: Order | None = None,
    ) -> Outcome[Category]:
        if self._categories.exists_by_slug(slug.value):
            raise CategoryAlreadyExistsError(slug.value)
        if parent_id is not None and self._categories.find_by_id(parent_id) is None:
            raise ParentCategoryNotFoundError(parent_id.value)

        category = Category(
            id=category_id,
            name=name,
            slug=slug,
            timestamps=Timestamps.create(at),
            description=description or Description(),
            parent_id=parent_id,
            order=order or Order(),
        )
        event = CategoryCreated(
            category_id=category.id.value,
            category_name=category.name.value,
            slug=category.slug.value,
            parent_id=parent_id.value if parent_id else None,
            created_at=at,
        )
        return Outcome(category, [event])


class CategoryUpdater:
    """
    修改分类

    更换父分类时沿新父分类的祖先链向上检查，
    遇到分类自身即拒绝，防止形成环。
    """

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def update(
        self,
        category: Category,
        at: datetime,
        name: CategoryName | None = None,
        slug: CategorySlug | None = None,
        description: Description | None = None,
        parent_id: CategoryId | None | _Unchanged = UNCHANGED,
        order: Order | None = None,
    ) -> Outcome[Category]:
        new_parent = category.parent_id if isinstance(parent_id, _Unchanged) else parent_id
        changes = {
            "name": name if name is not None else category.name,
            "slug": slug if slug is not None else category.slug,
            "description": description if description is not None else category.description,
            "parent_id": new_parent,
            "order": order if order is not None else category.order,
        }
        changed_fields = [key for key, value in changes.items() if getattr(category, key) != value]
        if not changed_fields:
            return Outcome(category)

        if "slug" in changed_fields and self._categories.exists_by_slug(changes["slug"].value):
            raise SlugAlreadyExistsError(changes["slug"].value)
        if "parent_id" in changed_fields and new_parent is not None:
            self._ensure_valid_parent(category.id, new_parent)

        updated = category.evolve(timestamps=category.timestamps.touched(at), **changes)
        event = CategoryUpdated(
            category_id=updated.id.value,
            category_name=updated.name.value,
            slug=updated.slug.value,
            parent_id=updated.parent_id.value if updated.parent_id else None,
            changed_fields=tuple(changed_fields),
            updated_at=updated.updated_at,
        )
        return Outcome(updated, [event])

    def _ensure_valid_parent(self, category_id: CategoryId, parent_id: CategoryId) -> None:
        parent = self._categories.find_by_id(parent_id)
        if parent is None:
            raise ParentCategoryNotFoundError(parent_id.value)

        visited: set[str] = set()
        current: Category | None = parent
        while current is not None:
            if current.id == category_id:
                raise CategoryCycleError(category_id.value, parent_id.value)
            # 已损坏的数据中可能已有环
            if current.id.value in visited:
                break
            visited.add(current.id.value)
            current = (
                self._categories.find_by_id(current.parent_id)
                if current.parent_id is not None
                else None
            )


class CategoryDeleter:
    """删除分类；存在子分类时拒绝"""

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def delete(self, category: Category, at: datetime) -> Outcome[Category]:
        children = self._categories.find_by_parent_id(category.id)
        if children:
            raise CategoryHasChildrenError(category.id.value, len(children))

        event = CategoryDeleted(
            category_id=category.id.value,
            category_name=category.name.value,
            deleted_at=at,
        )
        return Outcome(category, [event])
