"""分类领域事件"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import DomainEvent


@dataclass(frozen=True)
class CategoryCreated(DomainEvent):
    name = "category.created"
    occurred_field = "created_at"

    category_id: str
    category_name: str
    slug: str
    parent_id: str | None
    created_at: datetime


@dataclass(frozen=True)
class CategoryUpdated(DomainEvent):
    name = "category.updated"
    occurred_field = "updated_at"

    category_id: str
    category_name: str
    slug: str
    parent_id: str | None
    changed_fields: tuple[str, ...]
    updated_at: datetime


@dataclass(frozen=True)
class CategoryDeleted(DomainEvent):
    name = "category.deleted"
    occurred_field = "deleted_at"

    category_id: str
    category_name: str
    deleted_at: datetime
