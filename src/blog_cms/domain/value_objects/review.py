"""审核相关值对象"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...shared.constants import COMMENT_MAX_LENGTH, REVIEW_REASON_MAX_LENGTH
from ...shared.exceptions import InvalidValueError
from .base import SelfValidating


class ReviewOutcome(str, Enum):
    """审核结论"""

    APPROVE = "approved"
    REJECT = "rejected"


@dataclass(frozen=True)
class ReviewDecision(SelfValidating):
    """
    审核决定

    驳回必须给出理由；通过时理由可选。理由去除首尾空白，
    空白理由视为未提供。
    """

    outcome: ReviewOutcome
    reason: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.outcome, ReviewOutcome):
            raise InvalidValueError(f"无效的审核结论: {self.outcome}")

        reason = self.reason.strip() if isinstance(self.reason, str) else None
        object.__setattr__(self, "reason", reason or None)

        if self.outcome is ReviewOutcome.REJECT and self.reason is None:
            raise InvalidValueError("驳回时必须填写理由")
        if self.reason is not None and len(self.reason) > REVIEW_REASON_MAX_LENGTH:
            raise InvalidValueError(f"审核理由不能超过 {REVIEW_REASON_MAX_LENGTH} 个字符")

    @classmethod
    def approve(cls, reason: str | None = None) -> ReviewDecision:
        return cls(ReviewOutcome.APPROVE, reason)

    @classmethod
    def reject(cls, reason: str) -> ReviewDecision:
        return cls(ReviewOutcome.REJECT, reason)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReviewDecision:
        try:
            outcome = ReviewOutcome(data.get("decision") or data.get("outcome"))
        except ValueError as e:
            raise InvalidValueError(f"无效的审核结论: {data.get('decision')}") from e
        return cls(outcome, data.get("reason"))

    @property
    def is_approved(self) -> bool:
        return self.outcome is ReviewOutcome.APPROVE

    def to_dict(self) -> dict[str, Any]:
        return {"decision": self.outcome.value, "reason": self.reason}


@dataclass(frozen=True)
class EditorialComment(SelfValidating):
    """
    编辑评论

    可以针对正文中的一段选区：选区文本、起止位置要么全部提供，
    要么全部不提供；位置非负且结束位置大于起始位置。
    """

    comment: str
    selected_text: str | None = None
    position_start: int | None = None
    position_end: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.comment, str) or not self.comment.strip():
            raise InvalidValueError("评论内容不能为空")
        object.__setattr__(self, "comment", self.comment.strip())
        if len(self.comment) > COMMENT_MAX_LENGTH:
            raise InvalidValueError(f"评论内容不能超过 {COMMENT_MAX_LENGTH} 个字符")

        selection = (self.selected_text, self.position_start, self.position_end)
        provided = [part is not None for part in selection]
        if any(provided) and not all(provided):
            raise InvalidValueError("选区文本与起止位置必须同时提供")
        if all(provided):
            if not isinstance(self.position_start, int) or not isinstance(self.position_end, int):
                raise InvalidValueError("选区位置必须是整数")
            if self.position_start < 0 or self.position_end < 0:
                raise InvalidValueError("选区位置不能为负数")
            if self.position_end <= self.position_start:
                raise InvalidValueError("选区结束位置必须大于起始位置")

    @property
    def has_selection(self) -> bool:
        return self.selected_text is not None
