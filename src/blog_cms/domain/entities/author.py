"""作者聚合快照"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ..value_objects import AuthorBio, AuthorEmail, AuthorId, AuthorName, Timestamps


@dataclass(frozen=True)
class Author:
    """作者（邮箱全局唯一，被文章引用时不能删除）"""

    id: AuthorId
    name: AuthorName
    email: AuthorEmail
    bio: AuthorBio
    timestamps: Timestamps

    def evolve(self, **changes: Any) -> Author:
        return replace(self, **changes)

    @property
    def created_at(self) -> datetime:
        return self.timestamps.created_at

    @property
    def updated_at(self) -> datetime:
        return self.timestamps.updated_at
