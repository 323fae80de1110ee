"""分类树构建"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...shared.constants import DEFAULT_TREE_MAX_DEPTH

if TYPE_CHECKING:
    from ..entities import Category
    from ..repositories import CategoryRepository
    from ..value_objects import CategoryId


@dataclass
class CategoryNode:
    """分类树节点"""

    id: str
    name: str
    slug: str
    description: str | None
    order: int
    children: list[CategoryNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "order": self.order,
            "children": [child.to_dict() for child in self.children],
        }


class CategoryTreeBuilder:
    """
    构建分类树

    从根分类（或指定分类的子分类）开始逐层展开，最多 max_depth 层，
    同层节点按 order 排序。指定的根分类不存在时返回空列表。
    """

    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def build(self, root_id: CategoryId | None = None, max_depth: int = DEFAULT_TREE_MAX_DEPTH) -> list[CategoryNode]:
        if root_id is not None:
            if self._categories.find_by_id(root_id) is None:
                return []
            categories = self._categories.find_by_parent_id(root_id)
        else:
            categories = self._categories.find_by_parent_id(None)

        return self._build_nodes(categories, max_depth, 1)

    def _build_nodes(self, categories: list[Category], max_depth: int, depth: int) -> list[CategoryNode]:
        nodes = []
        for category in categories:
            node = CategoryNode(
                id=category.id.value,
                name=category.name.value,
                slug=category.slug.value,
                description=category.description.value,
                order=category.order.value,
            )
            if depth < max_depth:
                children = self._categories.find_by_parent_id(category.id)
                node.children = self._build_nodes(children, max_depth, depth + 1)
            nodes.append(node)

        nodes.sort(key=lambda n: n.order)
        return nodes
