"""处理器中间件基类"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from ...dto import GatewayRequest, GatewayResponse
    from ..pipeline import Next

M = TypeVar("M")
T = TypeVar("T")


class MessageHandler(Protocol[M, T]):
    def handle(self, message: M) -> T:
        ...


class Processor(Generic[M, T]):
    """
    管道的终端中间件

    把请求转换为命令/查询，交给处理器执行，再把结果映射为响应。
    不调用 next。
    """

    def __init__(
        self,
        handler: MessageHandler[M, T],
        to_message: Callable[[Any], M],
        to_response: Callable[[T], GatewayResponse],
    ):
        self._handler = handler
        self._to_message = to_message
        self._to_response = to_response

    def __call__(self, request: GatewayRequest, next: Next | None = None) -> GatewayResponse:
        message = self._to_message(request)
        result = self._handler.handle(message)
        return self._to_response(result)
