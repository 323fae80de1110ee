"""分类数据传输对象"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...domain.entities import Category
from ...domain.services import CategoryNode
from ...domain.value_objects import (
    CategoryId,
    CategoryName,
    CategorySlug,
    Description,
    Order,
)
from ...shared.utils import to_iso
from .base import GatewayRequest, GatewayResponse, collect_violations


# ============== 请求 ==============


@dataclass(frozen=True)
class CreateCategoryRequest(GatewayRequest):
    """未提供 slug 时由名称生成"""

    REQUIRED = ("name",)

    name: str
    slug: str | None = None
    description: str | None = None
    parent_id: str | None = None
    order: int = 0

    def validate(self) -> list[str]:
        return collect_violations(
            CategoryName.parse(self.name),
            CategorySlug.parse(self.slug) if self.slug else None,
            Description.parse(self.description),
            CategoryId.parse(self.parent_id) if self.parent_id else None,
            Order.parse(self.order),
        )


@dataclass(frozen=True)
class UpdateCategoryRequest(GatewayRequest):
    """None 表示不修改；detach_parent 将分类移到根"""

    REQUIRED = ("category_id",)

    category_id: str
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    parent_id: str | None = None
    order: int | None = None
    detach_parent: bool = False

    def validate(self) -> list[str]:
        violations = collect_violations(
            CategoryId.parse(self.category_id),
            CategoryName.parse(self.name) if self.name is not None else None,
            CategorySlug.parse(self.slug) if self.slug is not None else None,
            Description.parse(self.description) if self.description is not None else None,
            CategoryId.parse(self.parent_id) if self.parent_id else None,
            Order.parse(self.order) if self.order is not None else None,
        )
        if self.detach_parent and self.parent_id:
            violations.append("不能同时指定父分类与移到根")
        return violations


@dataclass(frozen=True)
class CategoryIdRequest(GatewayRequest):
    REQUIRED = ("category_id",)

    category_id: str

    def validate(self) -> list[str]:
        return collect_violations(CategoryId.parse(self.category_id))


@dataclass(frozen=True)
class GetCategoryRequest(CategoryIdRequest):
    pass


@dataclass(frozen=True)
class DeleteCategoryRequest(CategoryIdRequest):
    pass


@dataclass(frozen=True)
class ListCategoriesRequest(GatewayRequest):
    parent_id: str | None = None
    roots_only: bool = False

    def validate(self) -> list[str]:
        return collect_violations(CategoryId.parse(self.parent_id) if self.parent_id else None)


@dataclass(frozen=True)
class GetCategoryTreeRequest(GatewayRequest):
    """max_depth 为 None 时使用配置的默认深度"""

    root_id: str | None = None
    max_depth: int | None = None

    def validate(self) -> list[str]:
        violations = collect_violations(CategoryId.parse(self.root_id) if self.root_id else None)
        if self.max_depth is not None and (not isinstance(self.max_depth, int) or self.max_depth < 1):
            violations.append("树的最大深度必须是不小于 1 的整数")
        return violations


# ============== 响应 ==============


@dataclass(frozen=True)
class CategoryResponse(GatewayResponse):
    id: str
    name: str
    slug: str
    description: str | None
    parent_id: str | None
    order: int
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, category: Category) -> CategoryResponse:
        return cls(
            id=category.id.value,
            name=category.name.value,
            slug=category.slug.value,
            description=category.description.value,
            parent_id=category.parent_id.value if category.parent_id else None,
            order=category.order.value,
            created_at=to_iso(category.created_at),  # type: ignore[arg-type]
            updated_at=to_iso(category.updated_at),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class CategoryListResponse(GatewayResponse):
    items: list[CategoryResponse] = field(default_factory=list)

    @classmethod
    def from_entities(cls, categories: list[Category]) -> CategoryListResponse:
        return cls(items=[CategoryResponse.from_entity(category) for category in categories])


@dataclass(frozen=True)
class CategoryTreeResponse(GatewayResponse):
    """树节点为 {id, name, slug, description, order, children} 字典"""

    nodes: list[dict[str, Any]] = field(default_factory=list)
    max_depth: int = 0

    @classmethod
    def from_nodes(cls, nodes: list[CategoryNode], max_depth: int) -> CategoryTreeResponse:
        return cls(nodes=[node.to_dict() for node in nodes], max_depth=max_depth)
