"""标识与 slug 生成适配器"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from loguru import logger

from ...domain.value_objects import ArticleId, AuthorId, CategoryId, CommentId
from ...shared.constants import SLUG_MAX_LENGTH
from ...shared.utils.text import fallback_slug, slugify

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...domain.repositories import ArticleRepository, CategoryRepository


class UuidIdGenerator:
    """基于 uuid4 的标识生成器"""

    def next_article_id(self) -> ArticleId:
        return ArticleId(str(uuid.uuid4()))

    def next_author_id(self) -> AuthorId:
        return AuthorId(str(uuid.uuid4()))

    def next_category_id(self) -> CategoryId:
        return CategoryId(str(uuid.uuid4()))

    def next_comment_id(self) -> CommentId:
        return CommentId(str(uuid.uuid4()))


class UniqueSlugGenerator:
    """
    slug 生成器

    slugify 只做文本转换，音译后为空时改用摘要 slug；generate_from_* 在
    slug 已被占用时依次尝试 base-1、base-2 ...，必要时截短 base 使结果
    不超过最大长度。
    """

    def __init__(self, articles: ArticleRepository, categories: CategoryRepository):
        self._articles = articles
        self._categories = categories

    def slugify(self, text: str) -> str:
        return slugify(text) or fallback_slug(text)

    def generate_from_title(self, title: str) -> str:
        return self._unique(self.slugify(title), self._articles.exists_with_slug)

    def generate_from_name(self, name: str) -> str:
        return self._unique(self.slugify(name), self._categories.exists_by_slug)

    @staticmethod
    def _unique(base: str, taken: Callable[[str], bool]) -> str:
        if not base or not taken(base):
            return base

        counter = 1
        while True:
            suffix = f"-{counter}"
            candidate = base[: SLUG_MAX_LENGTH - len(suffix)].rstrip("-") + suffix
            if not taken(candidate):
                logger.debug(f"slug 已被占用，改用: {candidate}")
                return candidate
            counter += 1
