"""编辑评论领域服务"""

from __future__ import annotations

from datetime import datetime

from ...shared.exceptions import InvalidValueError
from ..entities import Article, ArticleComment
from ..events import EditorialCommentAdded, Outcome
from ..value_objects import CommentId, EditorialComment


class EditorialCommenter:
    """为文章添加编辑评论"""

    def add(
        self,
        article: Article,
        comment_id: CommentId,
        reviewer_id: str,
        comment: EditorialComment,
        at: datetime,
    ) -> Outcome[ArticleComment]:
        if not reviewer_id or not reviewer_id.strip():
            raise InvalidValueError("评论人不能为空")

        record = ArticleComment(
            id=comment_id,
            article_id=article.id,
            reviewer_id=reviewer_id.strip(),
            comment=comment,
            created_at=at,
        )
        event = EditorialCommentAdded(
            comment_id=record.id.value,
            article_id=record.article_id.value,
            reviewer_id=record.reviewer_id,
            comment=comment.comment,
            created_at=at,
        )
        return Outcome(record, [event])
