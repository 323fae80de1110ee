"""作者命令与处理器"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from ...domain.entities import Author
from ...domain.events import AuthorDeleted
from ...domain.services import AuthorCreator, AuthorDeletor, AuthorUpdater
from ...domain.value_objects import AuthorBio, AuthorEmail, AuthorId, AuthorName
from ...shared.exceptions import AuthorNotFoundError
from .base import CommandHandler

if TYPE_CHECKING:
    from ...domain.repositories import AuthorRepository
    from ..ports.outbound import Clock, EventBusPort


# ============== 命令 ==============


@dataclass(frozen=True)
class CreateAuthorCommand:
    author_id: str
    name: str
    email: str
    bio: str = ""


@dataclass(frozen=True)
class UpdateAuthorCommand:
    """None 表示不修改该字段"""

    author_id: str
    name: str | None = None
    email: str | None = None
    bio: str | None = None


@dataclass(frozen=True)
class DeleteAuthorCommand:
    author_id: str


# ============== 处理器 ==============


class _AuthorHandler(CommandHandler):
    def __init__(self, authors: AuthorRepository, event_bus: EventBusPort, clock: Clock | None = None):
        super().__init__(event_bus, clock)
        self._authors = authors

    def _load(self, author_id: str) -> Author:
        author = self._authors.find_by_id(AuthorId(author_id))
        if author is None:
            raise AuthorNotFoundError(author_id)
        return author


class CreateAuthorHandler(_AuthorHandler):
    def __init__(
        self,
        creator: AuthorCreator,
        authors: AuthorRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(authors, event_bus, clock)
        self._creator = creator

    def handle(self, command: CreateAuthorCommand) -> Author:
        outcome = self._creator.create(
            author_id=AuthorId(command.author_id),
            name=AuthorName(command.name),
            email=AuthorEmail(command.email),
            bio=AuthorBio(command.bio),
            at=self._now(),
        )
        self._authors.add(outcome.state)
        self._dispatch(outcome)
        logger.info(f"作者已创建: {outcome.state.id} <{outcome.state.email}>")
        return outcome.state


class UpdateAuthorHandler(_AuthorHandler):
    def __init__(
        self,
        updater: AuthorUpdater,
        authors: AuthorRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(authors, event_bus, clock)
        self._updater = updater

    def handle(self, command: UpdateAuthorCommand) -> Author:
        name = AuthorName(command.name) if command.name is not None else None
        email = AuthorEmail(command.email) if command.email is not None else None
        bio = AuthorBio(command.bio) if command.bio is not None else None

        author = self._load(command.author_id)
        outcome = self._updater.update(author, self._now(), name=name, email=email, bio=bio)
        if outcome.state is not author:
            self._authors.update(outcome.state)
        self._dispatch(outcome)
        return outcome.state


class DeleteAuthorHandler(_AuthorHandler):
    def __init__(
        self,
        deletor: AuthorDeletor,
        authors: AuthorRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(authors, event_bus, clock)
        self._deletor = deletor

    def handle(self, command: DeleteAuthorCommand) -> AuthorDeleted:
        author = self._load(command.author_id)
        outcome = self._deletor.delete(author, self._now())
        tombstone = outcome.events[0]
        self._authors.remove(author.id)
        self._dispatch(outcome)
        logger.info(f"作者已删除: {author.id}")
        return tombstone  # type: ignore[return-value]
