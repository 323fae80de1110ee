"""文章更新领域服务（更新与自动保存共用）"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from ...shared.exceptions import PublishedArticleRequiresApprovalError, SlugAlreadyExistsError
from ..entities import Article
from ..events import ArticleUpdated, Outcome
from ..value_objects import Content, Slug, Title

if TYPE_CHECKING:
    from ..repositories import ArticleRepository


class ArticleUpdater:
    """
    修改文章标题与正文

    规则：
    - 已发布的文章一律拒绝修改（无论字段是否真的变化）
    - 只有标题变化时才重新计算 slug；新 slug 与当前不同且已被占用时拒绝
    - changed_fields 按 title、content 的顺序列出值不相等的字段
    - 没有任何字段变化时返回原快照，不产生事件
    """

    def __init__(self, articles: ArticleRepository, slugify: Callable[[str], str]):
        self._articles = articles
        self._slugify = slugify

    def update(
        self,
        article: Article,
        at: datetime,
        title: Title | None = None,
        content: Content | None = None,
    ) -> Outcome[Article]:
        """
        更新文章

        Args:
            article: 当前快照
            at: 更新时间
            title: 新标题（None 表示不修改）
            content: 新正文（None 表示不修改）

        Raises:
            PublishedArticleRequiresApprovalError: 文章已发布
            SlugAlreadyExistsError: 新标题对应的 slug 已被占用
        """
        if article.is_published:
            raise PublishedArticleRequiresApprovalError(article.id.value)

        new_title = title if title is not None else article.title
        new_content = content if content is not None else article.content

        changed_fields: list[str] = []
        if new_title != article.title:
            changed_fields.append("title")
        if new_content != article.content:
            changed_fields.append("content")

        if not changed_fields:
            return Outcome(article)

        slug = article.slug
        if "title" in changed_fields:
            slug = self._recompute_slug(article, new_title)

        updated = article.evolve(
            title=new_title,
            content=new_content,
            slug=slug,
            timestamps=article.timestamps.touched(at),
        )
        event = ArticleUpdated(
            article_id=updated.id.value,
            title=updated.title.value,
            content=updated.content.value,
            slug=updated.slug.value,
            changed_fields=tuple(changed_fields),
            updated_at=updated.updated_at,
        )
        return Outcome(updated, [event])

    def _recompute_slug(self, article: Article, title: Title) -> Slug:
        candidate = self._slugify(title.value)
        # 标题无法生成 slug（例如全是符号）时保留原 slug
        if not candidate or candidate == article.slug.value:
            return article.slug
        if self._articles.exists_with_slug(candidate):
            raise SlugAlreadyExistsError(candidate)
        return Slug(candidate)
