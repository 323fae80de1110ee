"""基础设施适配器"""

from .event_bus import InMemoryEventBus
from .identity import UniqueSlugGenerator, UuidIdGenerator
from .persistence import (
    JsonArticleRepository,
    JsonAuthorRepository,
    JsonCategoryRepository,
    JsonDocumentStore,
    JsonEditorialCommentRepository,
)
from .translation import CatalogTranslator

__all__ = [
    "InMemoryEventBus",
    "UuidIdGenerator",
    "UniqueSlugGenerator",
    "CatalogTranslator",
    "JsonDocumentStore",
    "JsonArticleRepository",
    "JsonAuthorRepository",
    "JsonCategoryRepository",
    "JsonEditorialCommentRepository",
]
