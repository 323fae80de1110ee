"""文章创建领域服务"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ...shared.exceptions import ArticleAlreadyExistsError
from ..entities import Article
from ..events import ArticleCreated, Outcome
from ..value_objects import ArticleId, ArticleStatus, AuthorId, Content, Slug, Timestamps, Title

if TYPE_CHECKING:
    from ..repositories import ArticleRepository


class ArticleCreator:
    """
    创建草稿文章

    slug 必须全局唯一；冲突时抛出 ArticleAlreadyExistsError，
    不会产生任何快照或事件。
    """

    def __init__(self, articles: ArticleRepository):
        self._articles = articles

    def create(
        self,
        article_id: ArticleId,
        title: Title,
        content: Content,
        slug: Slug,
        author_id: AuthorId,
        at: datetime,
    ) -> Outcome[Article]:
        """
        创建文章

        Args:
            article_id: 新文章ID（由 IdGenerator 提供）
            title: 标题
            content: 正文
            slug: 已生成的 slug
            author_id: 作者ID
            at: 创建时间

        Returns:
            草稿状态的文章与一个 ArticleCreated 事件

        Raises:
            ArticleAlreadyExistsError: slug 已被占用
        """
        if self._articles.exists_with_slug(slug.value):
            raise ArticleAlreadyExistsError(slug.value)

        article = Article(
            id=article_id,
            title=title,
            content=content,
            slug=slug,
            status=ArticleStatus.DRAFT,
            author_id=author_id,
            timestamps=Timestamps.create(at),
        )
        event = ArticleCreated(
            article_id=article.id.value,
            title=article.title.value,
            content=article.content.value,
            slug=article.slug.value,
            status=article.status.value,
            author_id=article.author_id.value,
            created_at=article.created_at,
        )
        return Outcome(article, [event])
