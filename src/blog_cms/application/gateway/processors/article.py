"""文章网关处理器"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ....shared.utils import from_iso, to_iso
from ...commands import (
    AddEditorialCommentCommand,
    ApproveArticleCommand,
    AutoSaveArticleCommand,
    CreateArticleCommand,
    DeleteArticleCommand,
    PublishArticleCommand,
    RejectArticleCommand,
    SubmitForReviewCommand,
    UpdateArticleCommand,
)
from ...dto import (
    AddEditorialCommentRequest,
    ArticleListResponse,
    ArticleResponse,
    CreateArticleRequest,
    DeletionResponse,
    EditorialCommentListResponse,
    EditorialCommentResponse,
    ListEditorialCommentsRequest,
)
from ...queries import GetArticleQuery, ListArticlesQuery, ListEditorialCommentsQuery
from .base import Processor

if TYPE_CHECKING:
    from ....domain.entities import Article
    from ...commands import (
        AddEditorialCommentHandler,
        CreateArticleHandler,
    )
    from ...ports.outbound import IdGeneratorPort, SlugGeneratorPort
    from ...queries import ListEditorialCommentsHandler
    from ..pipeline import Next


class CreateArticleProcessor:
    """
    创建文章

    生成新的文章ID；请求未带 slug 时由标题生成。auto_suffix 为 True 时
    冲突的 slug 自动追加序号，否则冲突交给领域层报告。
    """

    def __init__(
        self,
        handler: CreateArticleHandler,
        id_generator: IdGeneratorPort,
        slug_generator: SlugGeneratorPort,
        auto_suffix: bool = False,
    ):
        self._handler = handler
        self._ids = id_generator
        self._slugs = slug_generator
        self._auto_suffix = auto_suffix

    def __call__(self, request: CreateArticleRequest, next: Next | None = None) -> ArticleResponse:
        slug = request.slug
        if not slug:
            generate = self._slugs.generate_from_title if self._auto_suffix else self._slugs.slugify
            slug = generate(request.title)

        command = CreateArticleCommand(
            article_id=self._ids.next_article_id().value,
            title=request.title,
            content=request.content,
            slug=slug,
            author_id=request.author_id,
        )
        return ArticleResponse.from_entity(self._handler.handle(command))


def delete_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: DeleteArticleCommand(article_id=r.article_id, deleted_by=r.deleted_by),
        lambda tombstone: DeletionResponse(
            id=tombstone.article_id,
            deleted_at=to_iso(tombstone.deleted_at),
            slug=tombstone.slug,
        ),
    )


class AddEditorialCommentProcessor:
    def __init__(self, handler: AddEditorialCommentHandler, id_generator: IdGeneratorPort):
        self._handler = handler
        self._ids = id_generator

    def __call__(self, request: AddEditorialCommentRequest, next: Next | None = None) -> EditorialCommentResponse:
        command = AddEditorialCommentCommand(
            comment_id=self._ids.next_comment_id().value,
            article_id=request.article_id,
            reviewer_id=request.reviewer_id,
            comment=request.comment,
            selected_text=request.selected_text,
            position_start=request.position_start,
            position_end=request.position_end,
        )
        return EditorialCommentResponse.from_entity(self._handler.handle(command))


def _article_response(article: Article) -> ArticleResponse:
    return ArticleResponse.from_entity(article)


def update_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: UpdateArticleCommand(article_id=r.article_id, title=r.title, content=r.content),
        _article_response,
    )


def auto_save_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: AutoSaveArticleCommand(article_id=r.article_id, title=r.title, content=r.content),
        _article_response,
    )


def submit_for_review_processor(handler) -> Processor:
    return Processor(handler, lambda r: SubmitForReviewCommand(article_id=r.article_id), _article_response)


def approve_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: ApproveArticleCommand(article_id=r.article_id, reviewer_id=r.reviewer_id, reason=r.reason),
        _article_response,
    )


def reject_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: RejectArticleCommand(article_id=r.article_id, reviewer_id=r.reviewer_id, reason=r.reason),
        _article_response,
    )


def publish_article_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: PublishArticleCommand(article_id=r.article_id, publish_at=from_iso(r.publish_at)),
        _article_response,
    )


def get_article_processor(handler) -> Processor:
    return Processor(handler, lambda r: GetArticleQuery(article_id=r.article_id), _article_response)


def list_articles_processor(handler) -> Processor:
    return Processor(
        handler,
        lambda r: ListArticlesQuery(
            page=r.page,
            limit=r.limit,
            status=r.status,
            author_id=r.author_id,
            search=r.search,
            sort_by=r.sort_by,
            order=r.order,
        ),
        ArticleListResponse.from_page,
    )


class ListEditorialCommentsProcessor:
    def __init__(self, handler: ListEditorialCommentsHandler):
        self._handler = handler

    def __call__(
        self, request: ListEditorialCommentsRequest, next: Next | None = None
    ) -> EditorialCommentListResponse:
        comments = self._handler.handle(ListEditorialCommentsQuery(article_id=request.article_id))
        return EditorialCommentListResponse(
            article_id=request.article_id,
            items=[EditorialCommentResponse.from_entity(comment) for comment in comments],
        )
