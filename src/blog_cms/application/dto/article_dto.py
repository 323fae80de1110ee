"""文章数据传输对象"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from ...domain.entities import Article, ArticleComment
from ...domain.value_objects import (
    ArticleCriteria,
    ArticleId,
    ArticleStatus,
    AuthorId,
    Content,
    EditorialComment,
    Page,
    ReviewDecision,
    ReviewOutcome,
    Slug,
    Title,
)
from ...shared.constants import DEFAULT_PAGE_LIMIT
from ...shared.utils import from_iso, to_iso
from .base import DeletionResponse, GatewayRequest, GatewayResponse, collect_violations


def _parse_iso(value: str | None, field_name: str) -> list[str]:
    if value is None:
        return []
    try:
        from_iso(value)
    except (TypeError, ValueError):
        return [f"{field_name} 不是有效的 ISO-8601 时间: {value}"]
    return []


# ============== 请求 ==============


@dataclass(frozen=True)
class CreateArticleRequest(GatewayRequest):
    """创建文章；未提供 slug 时由标题生成"""

    REQUIRED = ("title", "content", "author_id")

    title: str
    content: str
    author_id: str
    slug: str | None = None

    def validate(self) -> list[str]:
        return collect_violations(
            Title.parse(self.title),
            Content.parse(self.content),
            AuthorId.parse(self.author_id),
            Slug.parse(self.slug) if self.slug else None,
        )


@dataclass(frozen=True)
class UpdateArticleRequest(GatewayRequest):
    REQUIRED = ("article_id", "title", "content")

    article_id: str
    title: str
    content: str

    def validate(self) -> list[str]:
        return collect_violations(
            ArticleId.parse(self.article_id),
            Title.parse(self.title),
            Content.parse(self.content),
        )


@dataclass(frozen=True)
class AutoSaveArticleRequest(GatewayRequest):
    """自动保存：至少提供标题或正文之一"""

    REQUIRED = ("article_id",)

    article_id: str
    title: str | None = None
    content: str | None = None

    def validate(self) -> list[str]:
        violations = collect_violations(
            ArticleId.parse(self.article_id),
            Title.parse(self.title) if self.title is not None else None,
            Content.parse(self.content) if self.content is not None else None,
        )
        if self.title is None and self.content is None:
            violations.append("自动保存至少需要标题或正文")
        return violations


@dataclass(frozen=True)
class ArticleIdRequest(GatewayRequest):
    """只携带文章ID的请求"""

    REQUIRED = ("article_id",)

    article_id: str

    def validate(self) -> list[str]:
        return collect_violations(ArticleId.parse(self.article_id))


@dataclass(frozen=True)
class SubmitForReviewRequest(ArticleIdRequest):
    pass


@dataclass(frozen=True)
class GetArticleRequest(ArticleIdRequest):
    pass


@dataclass(frozen=True)
class ListEditorialCommentsRequest(ArticleIdRequest):
    pass


@dataclass(frozen=True)
class ApproveArticleRequest(GatewayRequest):
    REQUIRED = ("article_id", "reviewer_id")

    article_id: str
    reviewer_id: str
    reason: str | None = None

    def validate(self) -> list[str]:
        return collect_violations(
            ArticleId.parse(self.article_id),
            ReviewDecision.parse(ReviewOutcome.APPROVE, self.reason),
        )


@dataclass(frozen=True)
class RejectArticleRequest(GatewayRequest):
    """驳回必须给出理由"""

    REQUIRED = ("article_id", "reviewer_id", "reason")

    article_id: str
    reviewer_id: str
    reason: str

    def validate(self) -> list[str]:
        return collect_violations(
            ArticleId.parse(self.article_id),
            ReviewDecision.parse(ReviewOutcome.REJECT, self.reason),
        )


@dataclass(frozen=True)
class PublishArticleRequest(GatewayRequest):
    """publish_at 为可选的 ISO-8601 时间，可以是将来"""

    REQUIRED = ("article_id",)

    article_id: str
    publish_at: str | None = None

    def validate(self) -> list[str]:
        return collect_violations(ArticleId.parse(self.article_id)) + _parse_iso(
            self.publish_at, "publish_at"
        )


@dataclass(frozen=True)
class DeleteArticleRequest(GatewayRequest):
    REQUIRED = ("article_id",)

    article_id: str
    deleted_by: str | None = None

    def validate(self) -> list[str]:
        return collect_violations(ArticleId.parse(self.article_id))


@dataclass(frozen=True)
class ListArticlesRequest(GatewayRequest):
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    status: str | None = None
    author_id: str | None = None
    search: str | None = None
    sort_by: str = "createdAt"
    order: str = "DESC"

    def validate(self) -> list[str]:
        violations = collect_violations(
            ArticleCriteria.parse(
                page=self.page, limit=self.limit, sort_by=self.sort_by, order=self.order
            ),
            AuthorId.parse(self.author_id) if self.author_id else None,
        )
        if self.status and self.status.strip().lower() not in {s.value for s in ArticleStatus}:
            violations.append(f"无效的文章状态: {self.status}")
        return violations


@dataclass(frozen=True)
class AddEditorialCommentRequest(GatewayRequest):
    REQUIRED = ("article_id", "reviewer_id", "comment")

    article_id: str
    reviewer_id: str
    comment: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None

    def validate(self) -> list[str]:
        return collect_violations(
            ArticleId.parse(self.article_id),
            EditorialComment.parse(
                self.comment, self.selected_text, self.position_start, self.position_end
            ),
        )


# ============== 响应 ==============


@dataclass(frozen=True)
class ArticleResponse(GatewayResponse):
    """
    文章响应

    时间字段均为 ISO-8601 字符串；to_json/from_json 往返保持
    id、slug、status 与全部时间字符串不变。
    """

    id: str
    title: str
    content: str
    slug: str
    status: str
    author_id: str
    created_at: str
    updated_at: str
    published_at: str | None = None
    submitted_at: str | None = None
    reviewed_at: str | None = None
    reviewer_id: str | None = None
    review_reason: str | None = None
    excerpt: str = ""
    word_count: int = 0

    @classmethod
    def from_entity(cls, article: Article) -> ArticleResponse:
        return cls(
            id=article.id.value,
            title=article.title.value,
            content=article.content.value,
            slug=article.slug.value,
            status=article.status.value,
            author_id=article.author_id.value,
            created_at=to_iso(article.created_at),  # type: ignore[arg-type]
            updated_at=to_iso(article.updated_at),  # type: ignore[arg-type]
            published_at=to_iso(article.published_at),
            submitted_at=to_iso(article.submitted_at),
            reviewed_at=to_iso(article.reviewed_at),
            reviewer_id=article.reviewer_id,
            review_reason=article.review_reason,
            excerpt=article.excerpt,
            word_count=article.word_count,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArticleResponse:
        known = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        return self.data()

    def to_json(self) -> str:
        return json.dumps(self.data(), ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str) -> ArticleResponse:
        return cls.from_dict(json.loads(payload))


@dataclass(frozen=True)
class ArticleListResponse(GatewayResponse):
    items: list[ArticleResponse] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    pages: int = 0

    @classmethod
    def from_page(cls, page: Page[Article]) -> ArticleListResponse:
        return cls(
            items=[ArticleResponse.from_entity(article) for article in page.items],
            total=page.total,
            page=page.page,
            limit=page.limit,
            pages=page.pages,
        )


@dataclass(frozen=True)
class EditorialCommentResponse(GatewayResponse):
    id: str
    article_id: str
    reviewer_id: str
    comment: str
    created_at: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None

    @classmethod
    def from_entity(cls, record: ArticleComment) -> EditorialCommentResponse:
        return cls(
            id=record.id.value,
            article_id=record.article_id.value,
            reviewer_id=record.reviewer_id,
            comment=record.comment.comment,
            created_at=to_iso(record.created_at),  # type: ignore[arg-type]
            selected_text=record.comment.selected_text,
            position_start=record.comment.position_start,
            position_end=record.comment.position_end,
        )


@dataclass(frozen=True)
class EditorialCommentListResponse(GatewayResponse):
    article_id: str
    items: list[EditorialCommentResponse] = field(default_factory=list)


__all__ = [
    "CreateArticleRequest",
    "UpdateArticleRequest",
    "AutoSaveArticleRequest",
    "SubmitForReviewRequest",
    "ApproveArticleRequest",
    "RejectArticleRequest",
    "PublishArticleRequest",
    "DeleteArticleRequest",
    "GetArticleRequest",
    "ListArticlesRequest",
    "AddEditorialCommentRequest",
    "ListEditorialCommentsRequest",
    "ArticleResponse",
    "ArticleListResponse",
    "EditorialCommentResponse",
    "EditorialCommentListResponse",
    "DeletionResponse",
]
