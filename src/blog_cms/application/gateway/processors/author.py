"""作者网关处理器"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....shared.utils import to_iso
from ...commands import CreateAuthorCommand, DeleteAuthorCommand, UpdateAuthorCommand
from ...dto import (
    ArticleListResponse,
    AuthorListResponse,
    AuthorResponse,
    CreateAuthorRequest,
    DeletionResponse,
)
from ...queries import GetAuthorArticlesQuery, GetAuthorQuery, ListAuthorsQuery
from .base import Processor

if TYPE_CHECKING:
    from ...commands import CreateAuthorHandler
    from ...ports.outbound import IdGeneratorPort
    from ..pipeline import Next


class CreateAuthorProcessor:
    """创建作者，作者ID由 IdGenerator 生成"""

    def __init__(self, handler: CreateAuthorHandler, id_generator: IdGeneratorPort):
        self._handler = handler
        self._ids = id_generator

    def __call__(self, request: CreateAuthorRequest, next: Next | None = None) -> AuthorResponse:
        command = CreateAuthorCommand(
            author_id=self._ids.next_author_id().value,
            name=request.name,
            email=request.email,
            bio=request.bio or "",
        )
        return AuthorResponse.from_entity(self._handler.handle(command))


def update_author_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: UpdateAuthorCommand(author_id=r.author_id, name=r.name, email=r.email, bio=r.bio),
        AuthorResponse.from_entity,
    )


def delete_author_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: DeleteAuthorCommand(author_id=r.author_id),
        lambda tombstone: DeletionResponse(id=tombstone.author_id, deleted_at=to_iso(tombstone.deleted_at)),
    )


def get_author_processor(handler) -> Processor:
    return Processor(handler, lambda r: GetAuthorQuery(author_id=r.author_id), AuthorResponse.from_entity)


def list_authors_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: ListAuthorsQuery(page=r.page, limit=r.limit),
        AuthorListResponse.from_page,
    )


def author_articles_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: GetAuthorArticlesQuery(author_id=r.author_id, page=r.page, limit=r.limit),
        ArticleListResponse.from_page,
    )
