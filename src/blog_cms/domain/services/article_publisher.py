"""发布领域服务"""

from __future__ import annotations

from datetime import datetime

from ...shared.exceptions import (
    ArticleAlreadyPublishedError,
    ArticleNotReadyError,
    InvalidValueError,
)
from ..entities import Article
from ..events import ArticlePublished, Outcome
from ..value_objects import ArticleStatus


class ArticlePublisher:
    """发布审核通过的文章"""

    def publish(
        self,
        article: Article,
        at: datetime,
        publish_at: datetime | None = None,
    ) -> Outcome[Article]:
        """
        发布文章

        Args:
            article: 当前快照
            at: 当前时间
            publish_at: 指定发布时间（可以是将来），默认为当前时间

        Raises:
            ArticleAlreadyPublishedError: 文章已发布
            ArticleNotReadyError: 文章未审核通过
            InvalidValueError: 指定的发布时间早于创建时间
        """
        if article.is_published:
            raise ArticleAlreadyPublishedError(article.id.value)
        if not article.status.can_be_published():
            raise ArticleNotReadyError(article.id.value, article.status.value)

        published_at = publish_at or at
        if published_at < article.created_at:
            raise InvalidValueError("发布时间不能早于创建时间")

        published = article.evolve(
            status=ArticleStatus.PUBLISHED,
            published_at=published_at,
            timestamps=article.timestamps.touched(at),
        )
        event = ArticlePublished(
            article_id=published.id.value,
            title=published.title.value,
            slug=published.slug.value,
            author_id=published.author_id.value,
            published_at=published_at,
        )
        return Outcome(published, [event])
