"""网关中间件管道"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol

from ...shared.exceptions import GatewayError
from .instrumentation import GatewayInstrumentation
from .middleware import ErrorHandler, LoggerMiddleware, TranslationErrorHandler, Validation

if TYPE_CHECKING:
    from ..dto import GatewayRequest, GatewayResponse
    from ..ports.outbound import TranslatorPort

Next = Callable[["GatewayRequest"], "GatewayResponse"]


class Middleware(Protocol):
    """中间件：要么返回响应（短路），要么调用 next 继续"""

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        ...


class Pipe:
    """
    按顺序组合中间件

    第一个中间件最先收到请求；最后一个应为 Processor，
    它不会再调用 next。
    """

    def __init__(self, middlewares: Sequence[Middleware], name: str = "pipe"):
        if not middlewares:
            raise ValueError("管道至少需要一个中间件")
        self._middlewares = list(middlewares)
        self._name = name

    def __call__(self, request: GatewayRequest) -> GatewayResponse:
        handler: Next = self._end_of_pipe
        for middleware in reversed(self._middlewares):
            handler = self._link(middleware, handler)
        return handler(request)

    @staticmethod
    def _link(middleware: Middleware, next_handler: Next) -> Next:
        def step(request: GatewayRequest) -> GatewayResponse:
            return middleware(request, next_handler)

        return step

    def _end_of_pipe(self, request: GatewayRequest) -> GatewayResponse:
        raise GatewayError(f"网关 {self._name} 缺少处理器", gateway=self._name)

    def __len__(self) -> int:
        return len(self._middlewares)


class Gateway:
    """一个用例的统一入口：Request → 中间件管道 → Response"""

    def __init__(self, name: str, middlewares: Sequence[Middleware]):
        self.name = name
        self._pipe = Pipe(middlewares, name=name)

    def __call__(self, request: GatewayRequest) -> GatewayResponse:
        return self._pipe(request)

    def __repr__(self) -> str:
        return f"Gateway(name={self.name!r}, middlewares={len(self._pipe)})"


def build_gateway(
    name: str,
    processor: Middleware,
    *,
    translator: TranslatorPort | None = None,
    extra: Sequence[Middleware] = (),
) -> Gateway:
    """
    按标准顺序组装网关

    Logger → ErrorHandler → [TranslationErrorHandler] → Validation → [extra...] → Processor

    Args:
        name: 网关名，例如 article.publish
        processor: 终端处理器
        translator: 提供时加入错误消息翻译
        extra: 校验之后、处理器之前的额外中间件（例如 SEO 检查）
    """
    instrumentation = GatewayInstrumentation(name)
    middlewares: list[Middleware] = [
        LoggerMiddleware(instrumentation),
        ErrorHandler(name, instrumentation),
    ]
    if translator is not None:
        middlewares.append(TranslationErrorHandler(translator))
    middlewares.append(Validation())
    middlewares.extend(extra)
    middlewares.append(processor)
    return Gateway(name, middlewares)


__all__ = ["Next", "Middleware", "Pipe", "Gateway", "build_gateway"]
