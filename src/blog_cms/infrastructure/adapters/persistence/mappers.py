"""实体与 JSON 记录之间的转换

记录中的时间为 ISO-8601 字符串。无法还原为有效实体的记录
以 DataCorruptionError 报告。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from ....domain.entities import Article, ArticleComment, Author, Category
from ....domain.value_objects import (
    ArticleId,
    ArticleStatus,
    AuthorBio,
    AuthorEmail,
    AuthorId,
    AuthorName,
    CategoryId,
    CategoryName,
    CategorySlug,
    CommentId,
    Content,
    Description,
    EditorialComment,
    Order,
    Slug,
    Timestamps,
    Title,
)
from ....shared.exceptions import DataCorruptionError, InvalidValueError
from ....shared.utils import from_iso, to_iso

E = TypeVar("E")
Record = dict[str, Any]


def _restore(kind: str, record: Record, build: Callable[[Record], E]) -> E:
    try:
        return build(record)
    except (InvalidValueError, KeyError, TypeError, ValueError) as e:
        raise DataCorruptionError(
            f"{kind} 记录无效 ({record.get('id', '?')}): {e}",
            details={"id": record.get("id")},
            cause=e,
        ) from e


def _timestamps(record: Record) -> Timestamps:
    return Timestamps(from_iso(record["created_at"]), from_iso(record["updated_at"]))  # type: ignore[arg-type]


# ============== 文章 ==============


def article_to_record(article: Article) -> Record:
    return {
        "id": article.id.value,
        "title": article.title.value,
        "content": article.content.value,
        "slug": article.slug.value,
        "status": article.status.value,
        "author_id": article.author_id.value,
        "created_at": to_iso(article.created_at),
        "updated_at": to_iso(article.updated_at),
        "published_at": to_iso(article.published_at),
        "submitted_at": to_iso(article.submitted_at),
        "reviewed_at": to_iso(article.reviewed_at),
        "reviewer_id": article.reviewer_id,
        "review_reason": article.review_reason,
    }


def record_to_article(record: Record) -> Article:
    return _restore(
        "文章",
        record,
        lambda r: Article(
            id=ArticleId(r["id"]),
            title=Title(r["title"]),
            content=Content(r["content"]),
            slug=Slug(r["slug"]),
            status=ArticleStatus(r["status"]),
            author_id=AuthorId(r["author_id"]),
            timestamps=_timestamps(r),
            published_at=from_iso(r.get("published_at")),
            submitted_at=from_iso(r.get("submitted_at")),
            reviewed_at=from_iso(r.get("reviewed_at")),
            reviewer_id=r.get("reviewer_id"),
            review_reason=r.get("review_reason"),
        ),
    )


# ============== 作者 ==============


def author_to_record(author: Author) -> Record:
    return {
        "id": author.id.value,
        "name": author.name.value,
        "email": author.email.value,
        "bio": author.bio.value,
        "created_at": to_iso(author.created_at),
        "updated_at": to_iso(author.updated_at),
    }


def record_to_author(record: Record) -> Author:
    return _restore(
        "作者",
        record,
        lambda r: Author(
            id=AuthorId(r["id"]),
            name=AuthorName(r["name"]),
            email=AuthorEmail(r["email"]),
            bio=AuthorBio(r.get("bio") or ""),
            timestamps=_timestamps(r),
        ),
    )


# ============== 分类 ==============


def category_to_record(category: Category) -> Record:
    return {
        "id": category.id.value,
        "name": category.name.value,
        "slug": category.slug.value,
        "description": category.description.value,
        "parent_id": category.parent_id.value if category.parent_id else None,
        "order": category.order.value,
        "created_at": to_iso(category.created_at),
        "updated_at": to_iso(category.updated_at),
    }


def record_to_category(record: Record) -> Category:
    return _restore(
        "分类",
        record,
        lambda r: Category(
            id=CategoryId(r["id"]),
            name=CategoryName(r["name"]),
            slug=CategorySlug(r["slug"]),
            timestamps=_timestamps(r),
            description=Description(r.get("description")),
            parent_id=CategoryId(r["parent_id"]) if r.get("parent_id") else None,
            order=Order(r.get("order", 0)),
        ),
    )


# ============== 编辑评论 ==============


def comment_to_record(comment: ArticleComment) -> Record:
    return {
        "id": comment.id.value,
        "article_id": comment.article_id.value,
        "reviewer_id": comment.reviewer_id,
        "comment": comment.comment.comment,
        "selected_text": comment.comment.selected_text,
        "position_start": comment.comment.position_start,
        "position_end": comment.comment.position_end,
        "created_at": to_iso(comment.created_at),
    }


def record_to_comment(record: Record) -> ArticleComment:
    return _restore(
        "编辑评论",
        record,
        lambda r: ArticleComment(
            id=CommentId(r["id"]),
            article_id=ArticleId(r["article_id"]),
            reviewer_id=r["reviewer_id"],
            comment=EditorialComment(
                r["comment"], r.get("selected_text"), r.get("position_start"), r.get("position_end")
            ),
            created_at=from_iso(r["created_at"]),  # type: ignore[arg-type]
        ),
    )
