"""异常体系测试"""

from enum import Enum

import pytest

from blog_cms.shared import exceptions
from blog_cms.shared.exceptions import (
    ArticleAlreadyExistsError,
    BlogCmsError,
    ErrorCategory,
    ErrorCode,
    GatewayError,
    InvalidSubmissionError,
    ReviewFailure,
    StorageWriteError,
    SubmissionFailure,
)


class TestErrorCode:
    """错误码"""

    @pytest.mark.unit
    def test_codes_unique(self) -> None:
        """测试错误码互不重复"""
        codes = [code.code for code in ErrorCode]
        assert len(codes) == len(set(codes))

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("category", "status"),
        [
            (ErrorCategory.VALIDATION, 400),
            (ErrorCategory.NOT_FOUND, 404),
            (ErrorCategory.CONFLICT, 409),
            (ErrorCategory.INVALID_TRANSITION, 409),
            (ErrorCategory.INTERNAL, 500),
        ],
    )
    def test_category_status(self, category: ErrorCategory, status: int) -> None:
        """测试错误分类对应的状态码"""
        assert category.status_code == status

    @pytest.mark.unit
    def test_failure_kinds_are_transitions(self) -> None:
        """测试状态机失败类型都属于状态流转错误"""
        for kind in [*SubmissionFailure, *ReviewFailure]:
            assert kind.value.category is ErrorCategory.INVALID_TRANSITION


class TestBlogCmsError:
    """基础异常"""

    @pytest.mark.unit
    def test_to_dict(self) -> None:
        """测试转换为字典"""
        data = ArticleAlreadyExistsError("hello-world").to_dict()

        assert data["error_code"] == 3001
        assert data["error_type"] == "ARTICLE_ALREADY_EXISTS"
        assert data["category"] == "conflict"
        assert data["details"] == {"slug": "hello-world"}

    @pytest.mark.unit
    def test_cause_kept(self) -> None:
        """测试保留原始异常"""
        cause = OSError("disk full")
        error = StorageWriteError("写入失败", cause=cause)

        assert error.cause is cause
        assert error.category is ErrorCategory.INTERNAL

    @pytest.mark.unit
    def test_with_user_message(self) -> None:
        """测试替换用户消息不修改原异常"""
        error = InvalidSubmissionError(SubmissionFailure.CANNOT_SUBMIT_PUBLISHED, "a1")
        translated = error.with_user_message("Published articles cannot be submitted")

        assert translated.user_message == "Published articles cannot be submitted"
        assert error.user_message == "已发布的文章不能提交审核"
        assert translated.details == {"id": "a1", "kind": "cannot_submit_published"}

    @pytest.mark.unit
    def test_gateway_error(self) -> None:
        """测试网关异常携带网关名与状态码"""
        error = GatewayError("文章未找到", gateway="article.get", error_code=ErrorCode.ARTICLE_NOT_FOUND)

        assert error.status_code == 404
        assert error.to_dict()["gateway"] == "article.get"


class TestExports:
    """模块导出"""

    @pytest.mark.unit
    def test_all_exports_are_error_types(self) -> None:
        """测试导出的名称都是异常类或错误枚举"""
        for name in exceptions.__all__:
            exported = getattr(exceptions, name)
            assert isinstance(exported, type), name
            assert issubclass(exported, (BlogCmsError, Enum)), name
