"""编辑评论实体"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import ArticleId, CommentId, EditorialComment


@dataclass(frozen=True)
class ArticleComment:
    """审核人员对文章的一条编辑评论"""

    id: CommentId
    article_id: ArticleId
    reviewer_id: str
    comment: EditorialComment
    created_at: datetime
