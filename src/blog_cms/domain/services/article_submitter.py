"""提交审核领域服务"""

from __future__ import annotations

from datetime import datetime

from ...shared.exceptions import InvalidSubmissionError, SubmissionFailure
from ..entities import Article
from ..events import ArticleSubmittedForReview, Outcome
from ..value_objects import ArticleStatus

# 不允许提交的状态与对应的失败类型
_SUBMISSION_FAILURES = {
    ArticleStatus.PENDING_REVIEW: SubmissionFailure.ALREADY_PENDING_REVIEW,
    ArticleStatus.APPROVED: SubmissionFailure.ALREADY_APPROVED,
    ArticleStatus.PUBLISHED: SubmissionFailure.CANNOT_SUBMIT_PUBLISHED,
    ArticleStatus.ARCHIVED: SubmissionFailure.CANNOT_SUBMIT_ARCHIVED,
}


class ArticleSubmitter:
    """
    将草稿或被驳回的文章提交审核

    重新提交会清空上一轮的审核信息。
    """

    def submit(self, article: Article, at: datetime) -> Outcome[Article]:
        """
        提交审核

        Raises:
            InvalidSubmissionError: 当前状态不允许提交，kind 给出具体原因
        """
        failure = _SUBMISSION_FAILURES.get(article.status)
        if failure is not None:
            raise InvalidSubmissionError(failure, article.id.value)

        submitted = article.evolve(
            status=ArticleStatus.PENDING_REVIEW,
            submitted_at=at,
            reviewed_at=None,
            reviewer_id=None,
            review_reason=None,
            timestamps=article.timestamps.touched(at),
        )
        event = ArticleSubmittedForReview(
            article_id=submitted.id.value,
            title=submitted.title.value,
            author_id=submitted.author_id.value,
            submitted_at=at,
        )
        return Outcome(submitted, [event])
