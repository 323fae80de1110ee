"""文章命令与处理器"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from loguru import logger

from ...domain.entities import Article, ArticleComment
from ...domain.events import ArticleDeleted
from ...domain.services import (
    ArticleCreator,
    ArticleDeleter,
    ArticlePublisher,
    ArticleReviewer,
    ArticleSubmitter,
    ArticleUpdater,
    EditorialCommenter,
)
from ...domain.value_objects import (
    ArticleId,
    AuthorId,
    CommentId,
    Content,
    EditorialComment,
    ReviewDecision,
    Slug,
    Title,
)
from ...shared.exceptions import ArticleNotFoundError
from .base import CommandHandler

if TYPE_CHECKING:
    from ...domain.repositories import ArticleRepository, EditorialCommentRepository
    from ..ports.outbound import Clock, EventBusPort


# ============== 命令 ==============


@dataclass(frozen=True)
class CreateArticleCommand:
    article_id: str
    title: str
    content: str
    slug: str
    author_id: str


@dataclass(frozen=True)
class UpdateArticleCommand:
    article_id: str
    title: str
    content: str


@dataclass(frozen=True)
class AutoSaveArticleCommand:
    """自动保存：标题与正文都可以缺省"""

    article_id: str
    title: str | None = None
    content: str | None = None


@dataclass(frozen=True)
class SubmitForReviewCommand:
    article_id: str


@dataclass(frozen=True)
class ApproveArticleCommand:
    article_id: str
    reviewer_id: str
    reason: str | None = None


@dataclass(frozen=True)
class RejectArticleCommand:
    """驳回必须给出理由"""

    article_id: str
    reviewer_id: str
    reason: str


@dataclass(frozen=True)
class PublishArticleCommand:
    article_id: str
    publish_at: datetime | None = None


@dataclass(frozen=True)
class DeleteArticleCommand:
    article_id: str
    deleted_by: str | None = None


@dataclass(frozen=True)
class AddEditorialCommentCommand:
    comment_id: str
    article_id: str
    reviewer_id: str
    comment: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None


# ============== 处理器 ==============


class _ArticleHandler(CommandHandler):
    """加载文章快照的公共逻辑"""

    def __init__(self, articles: ArticleRepository, event_bus: EventBusPort, clock: Clock | None = None):
        super().__init__(event_bus, clock)
        self._articles = articles

    def _load(self, article_id: str) -> Article:
        article = self._articles.find_by_id(ArticleId(article_id))
        if article is None:
            raise ArticleNotFoundError(article_id)
        return article


class CreateArticleHandler(_ArticleHandler):
    """创建草稿文章"""

    def __init__(
        self,
        creator: ArticleCreator,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._creator = creator

    def handle(self, command: CreateArticleCommand) -> Article:
        outcome = self._creator.create(
            article_id=ArticleId(command.article_id),
            title=Title(command.title),
            content=Content(command.content),
            slug=Slug(command.slug),
            author_id=AuthorId(command.author_id),
            at=self._now(),
        )
        self._articles.save(outcome.state)
        self._dispatch(outcome)
        logger.info(f"文章已创建: {outcome.state.id} ({outcome.state.slug})")
        return outcome.state


class UpdateArticleHandler(_ArticleHandler):
    """更新文章标题与正文"""

    def __init__(
        self,
        updater: ArticleUpdater,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._updater = updater

    def handle(self, command: UpdateArticleCommand | AutoSaveArticleCommand) -> Article:
        title = Title(command.title) if command.title is not None else None
        content = Content(command.content) if command.content is not None else None

        article = self._load(command.article_id)
        outcome = self._updater.update(article, self._now(), title=title, content=content)
        if outcome.state is not article:
            self._articles.save(outcome.state)
        self._dispatch(outcome)
        return outcome.state


class AutoSaveArticleHandler(UpdateArticleHandler):
    """自动保存；与更新共用同一领域操作，已发布文章同样被拒绝"""

    def handle(self, command: AutoSaveArticleCommand) -> Article:  # type: ignore[override]
        article = super().handle(command)
        logger.debug(f"文章自动保存: {command.article_id}")
        return article


class SubmitForReviewHandler(_ArticleHandler):
    def __init__(
        self,
        submitter: ArticleSubmitter,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._submitter = submitter

    def handle(self, command: SubmitForReviewCommand) -> Article:
        article = self._load(command.article_id)
        outcome = self._submitter.submit(article, self._now())
        self._articles.save(outcome.state)
        self._dispatch(outcome)
        return outcome.state


class ReviewArticleHandler(_ArticleHandler):
    """审核（通过/驳回）"""

    def __init__(
        self,
        reviewer: ArticleReviewer,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._reviewer = reviewer

    def handle(self, command: ApproveArticleCommand | RejectArticleCommand) -> Article:
        if isinstance(command, RejectArticleCommand):
            decision = ReviewDecision.reject(command.reason)
        else:
            decision = ReviewDecision.approve(command.reason)

        article = self._load(command.article_id)
        outcome = self._reviewer.review(article, command.reviewer_id, decision, self._now())
        self._articles.save(outcome.state)
        self._dispatch(outcome)
        logger.info(f"文章 {article.id} 审核结果: {outcome.state.status.label}")
        return outcome.state


class PublishArticleHandler(_ArticleHandler):
    def __init__(
        self,
        publisher: ArticlePublisher,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._publisher = publisher

    def handle(self, command: PublishArticleCommand) -> Article:
        article = self._load(command.article_id)
        outcome = self._publisher.publish(article, self._now(), publish_at=command.publish_at)
        self._articles.save(outcome.state)
        self._dispatch(outcome)
        logger.info(f"文章已发布: {article.id}")
        return outcome.state


class DeleteArticleHandler(_ArticleHandler):
    def __init__(
        self,
        deleter: ArticleDeleter,
        articles: ArticleRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._deleter = deleter

    def handle(self, command: DeleteArticleCommand) -> ArticleDeleted:
        """删除文章，返回墓碑事件"""
        article = self._load(command.article_id)
        outcome = self._deleter.delete(article, self._now(), deleted_by=command.deleted_by)
        tombstone = outcome.events[0]
        self._articles.remove(article.id)
        self._dispatch(outcome)
        logger.info(f"文章已删除: {article.id}")
        return tombstone  # type: ignore[return-value]


class AddEditorialCommentHandler(_ArticleHandler):
    """为文章添加编辑评论（文章必须存在）"""

    def __init__(
        self,
        commenter: EditorialCommenter,
        articles: ArticleRepository,
        comments: EditorialCommentRepository,
        event_bus: EventBusPort,
        clock: Clock | None = None,
    ):
        super().__init__(articles, event_bus, clock)
        self._commenter = commenter
        self._comments = comments

    def handle(self, command: AddEditorialCommentCommand) -> ArticleComment:
        comment = EditorialComment(
            comment=command.comment,
            selected_text=command.selected_text,
            position_start=command.position_start,
            position_end=command.position_end,
        )

        article = self._load(command.article_id)
        outcome = self._commenter.add(
            article,
            CommentId(command.comment_id),
            command.reviewer_id,
            comment,
            self._now(),
        )
        self._comments.add(outcome.state)
        self._dispatch(outcome)
        return outcome.state
