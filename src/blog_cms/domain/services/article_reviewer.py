"""审核领域服务"""

from __future__ import annotations

from datetime import datetime

from ...shared.exceptions import InvalidReviewError, InvalidValueError, ReviewFailure
from ..entities import Article
from ..events import ArticleApproved, ArticleRejected, Outcome
from ..value_objects import ArticleStatus, ReviewDecision

# 非待审核状态与对应的失败类型
_REVIEW_FAILURES = {
    ArticleStatus.DRAFT: ReviewFailure.INVALID_STATUS,
    ArticleStatus.APPROVED: ReviewFailure.ALREADY_APPROVED,
    ArticleStatus.REJECTED: ReviewFailure.INVALID_STATUS,
    ArticleStatus.PUBLISHED: ReviewFailure.CANNOT_REVIEW_PUBLISHED,
    ArticleStatus.ARCHIVED: ReviewFailure.CANNOT_REVIEW_ARCHIVED,
}


class ArticleReviewer:
    """对待审核文章作出通过或驳回的决定"""

    def review(
        self,
        article: Article,
        reviewer_id: str,
        decision: ReviewDecision,
        at: datetime,
    ) -> Outcome[Article]:
        """
        审核文章

        Args:
            article: 当前快照（必须为待审核）
            reviewer_id: 审核人标识
            decision: 审核决定
            at: 审核时间

        Raises:
            InvalidReviewError: 当前状态不允许审核
            InvalidValueError: 审核人为空
        """
        failure = _REVIEW_FAILURES.get(article.status)
        if failure is not None:
            raise InvalidReviewError(failure, article.id.value, article.status.value)
        if not reviewer_id or not reviewer_id.strip():
            raise InvalidValueError("审核人不能为空")
        reviewer_id = reviewer_id.strip()

        status = ArticleStatus.APPROVED if decision.is_approved else ArticleStatus.REJECTED
        reviewed = article.evolve(
            status=status,
            reviewed_at=at,
            reviewer_id=reviewer_id,
            review_reason=decision.reason,
            timestamps=article.timestamps.touched(at),
        )

        if decision.is_approved:
            event = ArticleApproved(
                article_id=reviewed.id.value,
                reviewer_id=reviewer_id,
                reason=decision.reason,
                reviewed_at=at,
            )
        else:
            event = ArticleRejected(
                article_id=reviewed.id.value,
                reviewer_id=reviewer_id,
                reason=decision.reason or "",
                reviewed_at=at,
            )
        return Outcome(reviewed, [event])

    def approve(
        self, article: Article, reviewer_id: str, at: datetime, reason: str | None = None
    ) -> Outcome[Article]:
        return self.review(article, reviewer_id, ReviewDecision.approve(reason), at)

    def reject(self, article: Article, reviewer_id: str, reason: str, at: datetime) -> Outcome[Article]:
        return self.review(article, reviewer_id, ReviewDecision.reject(reason), at)
