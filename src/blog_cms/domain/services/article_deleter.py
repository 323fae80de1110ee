"""删除领域服务"""

from __future__ import annotations

from datetime import datetime

from ..entities import Article
from ..events import ArticleDeleted, Outcome


class ArticleDeleter:
    """删除任意状态的文章，产生墓碑事件；实际移除由处理器交给仓储"""

    def delete(self, article: Article, at: datetime, deleted_by: str | None = None) -> Outcome[Article]:
        event = ArticleDeleted(
            article_id=article.id.value,
            slug=article.slug.value,
            deleted_by=deleted_by,
            deleted_at=at,
        )
        return Outcome(article, [event])
