"""网关中间件"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from ...domain.value_objects import ArticleId
from ...shared.exceptions import (
    BlogCmsError,
    ErrorCode,
    GatewayError,
    SeoRequirementsError,
    ValidationError,
)
from ...shared.utils.logger import clear_request_id, set_request_id

if TYPE_CHECKING:
    from ...domain.repositories import ArticleRepository
    from ..dto import GatewayRequest, GatewayResponse
    from ..ports.outbound import TranslatorPort
    from .instrumentation import GatewayInstrumentation
    from .pipeline import Next


class LoggerMiddleware:
    """记录调用开始与成功，并为本次调用设置 request_id"""

    def __init__(self, instrumentation: GatewayInstrumentation):
        self._instrumentation = instrumentation

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        set_request_id()
        started = time.perf_counter()
        try:
            self._instrumentation.start(request)
            response = next(request)
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            self._instrumentation.success(response, elapsed_ms)
            return response
        finally:
            clear_request_id()


class ErrorHandler:
    """
    错误处理中间件

    网关边界上唯一的错误转换点：任何异常都被记录并转换为 GatewayError，
    保留错误码、分类、消息与详细信息，不暴露内部异常类型。
    """

    def __init__(self, gateway: str, instrumentation: GatewayInstrumentation):
        self._gateway = gateway
        self._instrumentation = instrumentation

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        try:
            return next(request)
        except GatewayError:
            raise
        except BlogCmsError as e:
            self._instrumentation.error(request, e)
            raise GatewayError(
                e.user_message,
                gateway=self._gateway,
                error_code=e.error_code,
                details=e.details,
                cause=e,
            ) from e
        except Exception as e:
            self._instrumentation.error(request, e)
            raise GatewayError(
                f"{self._gateway} 处理过程中发生内部错误",
                gateway=self._gateway,
                error_code=ErrorCode.UNKNOWN_ERROR,
                cause=e,
            ) from e


class TranslationErrorHandler:
    """用翻译目录替换领域异常的用户消息"""

    def __init__(self, translator: TranslatorPort):
        self._translator = translator

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        try:
            return next(request)
        except GatewayError:
            raise
        except BlogCmsError as e:
            params = {"message": e.user_message, **e.details}
            message = self._translator.translate(e.translation_key, params, default=e.user_message)
            raise e.with_user_message(message) from e


class Validation:
    """调用请求的 validate()，一次性报告全部违规项"""

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        violations = request.validate()
        if violations:
            raise ValidationError(violations=violations)
        return next(request)


class SeoValidation:
    """
    发布前的 SEO 检查

    标题或正文纯文本过短时拒绝发布。文章不存在或已发布时不检查，
    由后续的处理器报告对应错误。
    """

    def __init__(self, articles: ArticleRepository, min_title_length: int, min_content_length: int):
        self._articles = articles
        self._min_title_length = min_title_length
        self._min_content_length = min_content_length

    def __call__(self, request: GatewayRequest, next: Next) -> GatewayResponse:
        article_id = getattr(request, "article_id", None)
        article = self._articles.find_by_id(ArticleId(article_id)) if article_id else None
        if article is not None and not article.is_published:
            violations = []
            if len(article.title.value) < self._min_title_length:
                violations.append(f"标题至少需要 {self._min_title_length} 个字符才能发布")
            if len(article.content.plain_text) < self._min_content_length:
                violations.append(f"正文至少需要 {self._min_content_length} 个字符才能发布")
            if violations:
                raise SeoRequirementsError(violations)
        return next(request)
