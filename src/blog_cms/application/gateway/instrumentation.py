"""网关调用的日志埋点"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...shared.exceptions import BlogCmsError, ErrorCategory
from ...shared.utils.logger import log_event, shorten_fields

if TYPE_CHECKING:
    from ..dto import GatewayRequest, GatewayResponse


class GatewayInstrumentation:
    """
    记录一次网关调用的开始、成功与失败

    事件名：<网关名>、<网关名>.success、<网关名>.error
    """

    def __init__(self, name: str):
        self.name = name

    def start(self, request: GatewayRequest) -> None:
        log_event(self.name, "INFO", **shorten_fields(request.data()))

    def success(self, response: GatewayResponse, elapsed_ms: float | None = None) -> None:
        log_event(
            f"{self.name}.success", "INFO", response=type(response).__name__, elapsed_ms=elapsed_ms
        )

    def error(self, request: GatewayRequest, error: Exception) -> None:
        if isinstance(error, BlogCmsError):
            internal = error.category is ErrorCategory.INTERNAL
            reason = error.user_message
            error_type = error.error_type
        else:
            internal = True
            reason = str(error)
            error_type = type(error).__name__
        log_event(
            f"{self.name}.error",
            "ERROR" if internal else "WARNING",
            reason=reason,
            error_type=error_type,
            **shorten_fields(request.data()),
        )
