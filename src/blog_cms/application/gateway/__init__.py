"""网关：把每个用例包装为统一的 Request → Response 中间件管道"""

from .instrumentation import GatewayInstrumentation
from .middleware import ErrorHandler, LoggerMiddleware, SeoValidation, TranslationErrorHandler, Validation
from .pipeline import Gateway, Middleware, Next, Pipe, build_gateway

__all__ = [
    "Gateway",
    "Pipe",
    "Middleware",
    "Next",
    "build_gateway",
    "GatewayInstrumentation",
    "LoggerMiddleware",
    "ErrorHandler",
    "TranslationErrorHandler",
    "Validation",
    "SeoValidation",
]
