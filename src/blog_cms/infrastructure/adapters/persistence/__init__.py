"""JSON 文件持久化"""

from .json_store import JsonDocumentStore
from .repositories import (
    JsonArticleRepository,
    JsonAuthorRepository,
    JsonCategoryRepository,
    JsonEditorialCommentRepository,
)

__all__ = [
    "JsonDocumentStore",
    "JsonArticleRepository",
    "JsonAuthorRepository",
    "JsonCategoryRepository",
    "JsonEditorialCommentRepository",
]
