"""作者领域事件"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .base import DomainEvent


@dataclass(frozen=True)
class AuthorCreated(DomainEvent):
    name = "author.created"
    occurred_field = "created_at"

    author_id: str
    author_name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class AuthorUpdated(DomainEvent):
    name = "author.updated"
    occurred_field = "updated_at"

    author_id: str
    author_name: str
    email: str
    changed_fields: tuple[str, ...]
    updated_at: datetime


@dataclass(frozen=True)
class AuthorDeleted(DomainEvent):
    name = "author.deleted"
    occurred_field = "deleted_at"

    author_id: str
    email: str
    deleted_at: datetime
