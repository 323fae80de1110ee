"""分类网关处理器"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....shared.utils import to_iso
from ...commands import CreateCategoryCommand, DeleteCategoryCommand, UpdateCategoryCommand
from ...dto import (
    CategoryListResponse,
    CategoryResponse,
    CategoryTreeResponse,
    CreateCategoryRequest,
    DeletionResponse,
    GetCategoryTreeRequest,
)
from ...queries import GetCategoryQuery, GetCategoryTreeQuery, ListCategoriesQuery
from .base import Processor

if TYPE_CHECKING:
    from ...commands import CreateCategoryHandler
    from ...ports.outbound import IdGeneratorPort, SlugGeneratorPort
    from ...queries import GetCategoryTreeHandler
    from ..pipeline import Next


class CreateCategoryProcessor:
    """创建分类；未提供 slug 时由名称生成未被占用的 slug"""

    def __init__(
        self,
        handler: CreateCategoryHandler,
        id_generator: IdGeneratorPort,
        slug_generator: SlugGeneratorPort,
    ):
        self._handler = handler
        self._ids = id_generator
        self._slugs = slug_generator

    def __call__(self, request: CreateCategoryRequest, next: Next | None = None) -> CategoryResponse:
        command = CreateCategoryCommand(
            category_id=self._ids.next_category_id().value,
            name=request.name,
            slug=request.slug or self._slugs.generate_from_name(request.name),
            description=request.description,
            parent_id=request.parent_id,
            order=request.order,
        )
        return CategoryResponse.from_entity(self._handler.handle(command))


class CategoryTreeProcessor:
    """未指定深度时使用配置的默认深度"""

    def __init__(self, handler: GetCategoryTreeHandler, default_max_depth: int):
        self._handler = handler
        self._default_max_depth = default_max_depth

    def __call__(self, request: GetCategoryTreeRequest, next: Next | None = None) -> CategoryTreeResponse:
        max_depth = request.max_depth if request.max_depth is not None else self._default_max_depth
        nodes = self._handler.handle(GetCategoryTreeQuery(root_id=request.root_id, max_depth=max_depth))
        return CategoryTreeResponse.from_nodes(nodes, max_depth)


def update_category_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: UpdateCategoryCommand(
            category_id=r.category_id,
            name=r.name,
            slug=r.slug,
            description=r.description,
            parent_id=r.parent_id,
            order=r.order,
            detach_parent=r.detach_parent,
        ),
        CategoryResponse.from_entity,
    )


def delete_category_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: DeleteCategoryCommand(category_id=r.category_id),
        lambda tombstone: DeletionResponse(id=tombstone.category_id, deleted_at=to_iso(tombstone.deleted_at)),
    )


def get_category_processor(handler) -> Processor:
    return Processor(handler, lambda r: GetCategoryQuery(category_id=r.category_id), CategoryResponse.from_entity)


def list_categories_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: ListCategoriesQuery(parent_id=r.parent_id, roots_only=r.roots_only),
        CategoryListResponse.from_entities,
    )
