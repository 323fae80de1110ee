"""作者生命周期领域服务"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ...shared.exceptions import AuthorAlreadyExistsError, AuthorHasArticlesError
from ..entities import Author
from ..events import AuthorCreated, AuthorDeleted, AuthorUpdated, Outcome
from ..value_objects import AuthorBio, AuthorEmail, AuthorId, AuthorName, Timestamps

if TYPE_CHECKING:
    from ..repositories import AuthorRepository


class AuthorCreator:
    """创建作者，邮箱必须唯一"""

    def __init__(self, authors: AuthorRepository):
        self._authors = authors

    def create(
        self,
        author_id: AuthorId,
        name: AuthorName,
        email: AuthorEmail,
        bio: AuthorBio,
        at: datetime,
    ) -> Outcome[Author]:
        if self._authors.find_by_email(email.value) is not None:
            raise AuthorAlreadyExistsError(email.value)

        author = Author(
            id=author_id,
            name=name,
            email=email,
            bio=bio,
            timestamps=Timestamps.create(at),
        )
        event = AuthorCreated(
            author_id=author.id.value,
            author_name=author.name.value,
            email=author.email.value,
            created_at=at,
        )
        return Outcome(author, [event])


class AuthorUpdater:
    """修改作者资料；邮箱唯一性检查排除作者自身"""

    def __init__(self, authors: AuthorRepository):
        self._authors = authors

    def update(
        self,
        author: Author,
        at: datetime,
        name: AuthorName | None = None,
        email: AuthorEmail | None = None,
        bio: AuthorBio | None = None,
    ) -> Outcome[Author]:
        new_name = name if name is not None else author.name
        new_email = email if email is not None else author.email
        new_bio = bio if bio is not None else author.bio

        changed_fields = [
            field_name
            for field_name, old, new in (
                ("name", author.name, new_name),
                ("email", author.email, new_email),
                ("bio", author.bio, new_bio),
            )
            if old != new
        ]
        if not changed_fields:
            return Outcome(author)

        if "email" in changed_fields:
            owner = self._authors.find_by_email(new_email.value)
            if owner is not None and owner.id != author.id:
                raise AuthorAlreadyExistsError(new_email.value)

        updated = author.evolve(
            name=new_name,
            email=new_email,
            bio=new_bio,
            timestamps=author.timestamps.touched(at),
        )
        event = AuthorUpdated(
            author_id=updated.id.value,
            author_name=updated.name.value,
            email=updated.email.value,
            changed_fields=tuple(changed_fields),
            updated_at=updated.updated_at,
        )
        return Outcome(updated, [event])


class AuthorDeletor:
    """删除作者；仍被文章引用时拒绝"""

    def __init__(self, authors: AuthorRepository):
        self._authors = authors

    def delete(self, author: Author, at: datetime) -> Outcome[Author]:
        count = self._authors.count_articles_by_author_id(author.id)
        if count > 0:
            raise AuthorHasArticlesError(author.id.value, count)

        event = AuthorDeleted(author_id=author.id.value, email=author.email.value, deleted_at=at)
        return Outcome(author, [event])
