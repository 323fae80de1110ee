"""分类命令与处理器"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from ...domain.entities import Category
from ...domain.events import CategoryDeleted
from ...domain.services import UNCHANGED, CategoryCreator, CategoryDeleter, CategoryUpdater
from ...domain.value_objects import (
    CategoryId,
    CategoryName,
    CategorySlug,
    Description,
    Order,
)
from ...shared.exceptions import CategoryNotFoundError
from .base import CommandHandler

if TYPE_CHECKING:
    from ...domain.repositories import CategoryRepository
    from ..ports.outbound import Clock, EventBusPort


# ============== 命令 ==============


@dataclass(frozen=True)
class CreateCategoryCommand:
    category_id: str
    name: str
    slug: str
    description: str | None = None
    parent_id: str | None = None
    order: int = 0


@dataclass(frozen=True)
class UpdateCategoryCommand:
    """
    None 表示不修改该字段；
    parent_id 为空字符串表示移到根，detach_parent=True 效果相同
    """

    category_id: str
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    parent_id: str | None = None
    order: int | None = None
    detach_parent: bool = False


@dataclass(frozen=True)
class DeleteCategoryCommand:
    category_id: str


# ============== 处理器 ==============


class _CategoryHandler(CommandHandler):
    def __init__(self, categories: CategoryRepository, event_bus: EventBusPort, clock: Clock | None = None):
        super().__init__(event_bus, clock)
        self._categories = categories

    def _load(self, category_id: str) -> Category:
        category = self._categories.find_by_id(CategoryId(category_id))
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category


class CreateCategoryHandler(_CategoryHandler):
    def __init__(
        self,
        creator: CategoryCreator,
        categories: CategoryRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(categories, event_bus, clock)
        self._creator = creator

    def handle(self, command: CreateCategoryCommand) -> Category:
        outcome = self._creator.create(
            category_id=CategoryId(command.category_id),
            name=CategoryName(command.name),
            slug=CategorySlug(command.slug),
            at=self._now(),
            description=Description(command.description),
            parent_id=CategoryId(command.parent_id) if command.parent_id else None,
            order=Order(command.order),
        )
        self._categories.save(outcome.state)
        self._dispatch(outcome)
        logger.info(f"分类已创建: {outcome.state.id} ({outcome.state.slug})")
        return outcome.state


class UpdateCategoryHandler(_CategoryHandler):
    def __init__(
        self,
        updater: CategoryUpdater,
        categories: CategoryRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(categories, event_bus, clock)
        self._updater = updater

    def handle(self, command: UpdateCategoryCommand) -> Category:
        if command.detach_parent or command.parent_id == "":
            parent_id = None
        elif command.parent_id is not None:
            parent_id = CategoryId(command.parent_id)
        else:
            parent_id = UNCHANGED

        category = self._load(command.category_id)
        outcome = self._updater.update(
            category,
            self._now(),
            name=CategoryName(command.name) if command.name is not None else None,
            slug=CategorySlug(command.slug) if command.slug is not None else None,
            description=Description(command.description) if command.description is not None else None,
            parent_id=parent_id,
            order=Order(command.order) if command.order is not None else None,
        )
        if outcome.state is not category:
            self._categories.save(outcome.state)
        self._dispatch(outcome)
        return outcome.state


class DeleteCategoryHandler(_CategoryHandler):
    def __init__(
        self,
        deleter: CategoryDeleter,
        categories: CategoryRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(categories, event_bus, clock)
        self._deleter = deleter

    def handle(self, command: DeleteCategoryCommand) -> CategoryDeleted:
        category = self._load(command.category_id)
        outcome = self._deleter.delete(category, self._now())
        tombstone = outcome.events[0]
        self._categories.remove(category.id)
        self._dispatch(outcome)
        logger.info(f"分类已删除: {category.id}")
        return tombstone  # type: ignore[return-value]
