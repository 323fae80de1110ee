"""分类聚合快照"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ...shared.exceptions import InvalidValueError
from ..value_objects import CategoryId, CategoryName, CategorySlug, Description, Order, Timestamps


@dataclass(frozen=True)
class Category:
    """
    分类

    分类通过 parent_id 组成树；没有 parent_id 的是根分类。
    树的深度只在查询时限制。
    """

    id: CategoryId
    name: CategoryName
    slug: CategorySlug
    timestamps: Timestamps
    description: Description = Description()
    parent_id: CategoryId | None = None
    order: Order = Order()

    def __post_init__(self) -> None:
        if self.parent_id is not None and self.parent_id.value == self.id.value:
            raise InvalidValueError("分类不能以自身为父分类")

    def evolve(self, **changes: Any) -> Category:
        return replace(self, **changes)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def created_at(self) -> datetime:
        return self.timestamps.created_at

    @property
    def updated_at(self) -> datetime:
        return self.timestamps.updated_at
