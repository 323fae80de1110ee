"""自定义异常类

包含：
- 错误分类 (ErrorCategory) 与错误码枚举 (ErrorCode)
- 状态机失败类型的封闭枚举 (SubmissionFailure / ReviewFailure)
- 分层异常类（领域层、应用层、基础设施层）
- 网关边界异常 (GatewayError)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """错误分类，决定传输层的响应类别"""

    VALIDATION = ("validation", 400)
    NOT_FOUND = ("not_found", 404)
    CONFLICT = ("conflict", 409)
    INVALID_TRANSITION = ("invalid_transition", 409)
    INTERNAL = ("internal", 500)

    def __init__(self, label: str, status_code: int):
        self._label = label
        self._status_code = status_code

    @property
    def label(self) -> str:
        return self._label

    @property
    def status_code(self) -> int:
        """对应的 HTTP 状态码"""
        return self._status_code


class ErrorCode(Enum):
    """错误码枚举

    错误码范围：
    - 1xxx: 通用/校验错误
    - 2xxx: 资源未找到
    - 3xxx: 唯一性与引用冲突
    - 4xxx: 状态流转错误
    - 5xxx: 存储错误
    - 6xxx: 配置错误
    - 7xxx: 网关错误
    """

    # 通用/校验错误 1xxx
    UNKNOWN_ERROR = (1000, "未知错误", ErrorCategory.INTERNAL)
    INVALID_INPUT = (1001, "输入无效", ErrorCategory.VALIDATION)
    INVALID_VALUE = (1002, "值对象校验失败", ErrorCategory.VALIDATION)

    # 资源未找到 2xxx
    ARTICLE_NOT_FOUND = (2001, "文章未找到", ErrorCategory.NOT_FOUND)
    AUTHOR_NOT_FOUND = (2002, "作者未找到", ErrorCategory.NOT_FOUND)
    CATEGORY_NOT_FOUND = (2003, "分类未找到", ErrorCategory.NOT_FOUND)
    PARENT_CATEGORY_NOT_FOUND = (2004, "父分类不存在", ErrorCategory.NOT_FOUND)

    # 冲突 3xxx
    ARTICLE_ALREADY_EXISTS = (3001, "相同 slug 的文章已存在", ErrorCategory.CONFLICT)
    SLUG_ALREADY_EXISTS = (3002, "slug 已被占用", ErrorCategory.CONFLICT)
    AUTHOR_ALREADY_EXISTS = (3003, "该邮箱的作者已存在", ErrorCategory.CONFLICT)
    AUTHOR_HAS_ARTICLES = (3004, "作者仍有关联文章，无法删除", ErrorCategory.CONFLICT)
    CATEGORY_ALREADY_EXISTS = (3005, "相同 slug 的分类已存在", ErrorCategory.CONFLICT)
    CATEGORY_HAS_CHILDREN = (3006, "分类仍有子分类，无法删除", ErrorCategory.CONFLICT)
    CATEGORY_CYCLE = (3007, "父分类设置会形成循环", ErrorCategory.CONFLICT)

    # 状态流转错误 4xxx
    ALREADY_PENDING_REVIEW = (4001, "文章已在审核中", ErrorCategory.INVALID_TRANSITION)
    SUBMISSION_ALREADY_APPROVED = (4002, "文章已审核通过，无需再次提交", ErrorCategory.INVALID_TRANSITION)
    CANNOT_SUBMIT_PUBLISHED = (4003, "已发布的文章不能提交审核", ErrorCategory.INVALID_TRANSITION)
    CANNOT_SUBMIT_ARCHIVED = (4004, "已归档的文章不能提交审核", ErrorCategory.INVALID_TRANSITION)
    REVIEW_INVALID_STATUS = (4011, "文章当前状态不允许审核", ErrorCategory.INVALID_TRANSITION)
    REVIEW_ALREADY_APPROVED = (4012, "文章已审核通过", ErrorCategory.INVALID_TRANSITION)
    CANNOT_REVIEW_PUBLISHED = (4013, "已发布的文章不能审核", ErrorCategory.INVALID_TRANSITION)
    CANNOT_REVIEW_ARCHIVED = (4014, "已归档的文章不能审核", ErrorCategory.INVALID_TRANSITION)
    ARTICLE_ALREADY_PUBLISHED = (4021, "文章已发布", ErrorCategory.INVALID_TRANSITION)
    ARTICLE_NOT_READY = (4022, "文章尚未审核通过，不能发布", ErrorCategory.INVALID_TRANSITION)
    PUBLISHED_ARTICLE_REQUIRES_APPROVAL = (
        4023,
        "已发布的文章需要重新审核后才能修改",
        ErrorCategory.INVALID_TRANSITION,
    )
    SEO_REQUIREMENTS_NOT_MET = (4024, "文章未满足发布的 SEO 要求", ErrorCategory.VALIDATION)

    # 存储错误 5xxx
    STORAGE_ERROR = (5000, "存储操作失败", ErrorCategory.INTERNAL)
    STORAGE_READ_ERROR = (5001, "读取数据失败", ErrorCategory.INTERNAL)
    STORAGE_WRITE_ERROR = (5002, "写入数据失败", ErrorCategory.INTERNAL)
    DATA_CORRUPTION = (5003, "存储数据已损坏", ErrorCategory.INTERNAL)

    # 配置错误 6xxx
    CONFIG_ERROR = (6000, "配置错误", ErrorCategory.INTERNAL)
    CONFIG_INVALID = (6001, "配置值无效", ErrorCategory.INTERNAL)

    # 网关错误 7xxx
    GATEWAY_NOT_FOUND = (7001, "未注册的网关", ErrorCategory.NOT_FOUND)

    def __init__(self, code: int, message: str, category: ErrorCategory):
        self._code = code
        self._message = message
        self._category = category

    @property
    def code(self) -> int:
        """错误码"""
        return self._code

    @property
    def message(self) -> str:
        """默认错误消息"""
        return self._message

    @property
    def category(self) -> ErrorCategory:
        """错误分类"""
        return self._category

    def __str__(self) -> str:
        return f"[{self._code}] {self._message}"


class SubmissionFailure(Enum):
    """提交审核失败的全部类型"""

    ALREADY_PENDING_REVIEW = ErrorCode.ALREADY_PENDING_REVIEW
    ALREADY_APPROVED = ErrorCode.SUBMISSION_ALREADY_APPROVED
    CANNOT_SUBMIT_PUBLISHED = ErrorCode.CANNOT_SUBMIT_PUBLISHED
    CANNOT_SUBMIT_ARCHIVED = ErrorCode.CANNOT_SUBMIT_ARCHIVED


class ReviewFailure(Enum):
    """审核（通过/驳回）失败的全部类型"""

    INVALID_STATUS = ErrorCode.REVIEW_INVALID_STATUS
    ALREADY_APPROVED = ErrorCode.REVIEW_ALREADY_APPROVED
    CANNOT_REVIEW_PUBLISHED = ErrorCode.CANNOT_REVIEW_PUBLISHED
    CANNOT_REVIEW_ARCHIVED = ErrorCode.CANNOT_REVIEW_ARCHIVED


class BlogCmsError(Exception):
    """基础异常类

    所有自定义异常的基类，支持错误码、错误分类、详细信息与翻译键。
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self._error_code = error_code or self.error_code
        self.error_code = self._error_code
        self._message = message or self._error_code.message
        self._details = details or {}
        self._cause = cause

        super().__init__(self._message)

    @property
    def code(self) -> int:
        """错误码"""
        return self._error_code.code

    @property
    def error_type(self) -> str:
        """错误码名称，例如 ARTICLE_NOT_FOUND"""
        return self._error_code.name

    @property
    def category(self) -> ErrorCategory:
        """错误分类"""
        return self._error_code.category

    @property
    def user_message(self) -> str:
        """用户友好的错误消息"""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """详细信息（同时作为翻译参数）"""
        return self._details

    @property
    def cause(self) -> Exception | None:
        """原始异常"""
        return self._cause

    @property
    def translation_key(self) -> str:
        """翻译目录中的键"""
        return f"error.{self._error_code.name.lower()}"

    def with_user_message(self, message: str) -> BlogCmsError:
        """返回替换了用户消息的副本（翻译后使用）"""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._message = message
        clone.args = (message,)
        return clone

    def to_dict(self) -> dict[str, Any]:
        """转换为字典（用于响应或日志）"""
        return {
            "error_code": self._error_code.code,
            "error_type": self._error_code.name,
            "category": self.category.label,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        return f"[{self._error_code.code}] {self._message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self._error_code.code}, message={self._message!r})"


# ============ 领域层异常 ============


class DomainError(BlogCmsError):
    """领域异常基类"""


class InvalidValueError(DomainError):
    """值对象校验失败"""

    error_code = ErrorCode.INVALID_VALUE


class ArticleNotFoundError(DomainError):
    """文章未找到异常"""

    error_code = ErrorCode.ARTICLE_NOT_FOUND

    def __init__(self, article_id: str):
        super().__init__(f"文章未找到: {article_id}", details={"id": article_id})


class AuthorNotFoundError(DomainError):
    """作者未找到异常"""

    error_code = ErrorCode.AUTHOR_NOT_FOUND

    def __init__(self, author_id: str):
        super().__init__(f"作者未找到: {author_id}", details={"id": author_id})


class CategoryNotFoundError(DomainError):
    """分类未找到异常"""

    error_code = ErrorCode.CATEGORY_NOT_FOUND

    def __init__(self, category_id: str):
        super().__init__(f"分类未找到: {category_id}", details={"id": category_id})


class ParentCategoryNotFoundError(DomainError):
    """父分类不存在"""

    error_code = ErrorCode.PARENT_CATEGORY_NOT_FOUND

    def __init__(self, parent_id: str):
        super().__init__(f"父分类不存在: {parent_id}", details={"id": parent_id})


class ArticleAlreadyExistsError(DomainError):
    """相同 slug 的文章已存在"""

    error_code = ErrorCode.ARTICLE_ALREADY_EXISTS

    def __init__(self, slug: str):
        super().__init__(f"slug 为 '{slug}' 的文章已存在", details={"slug": slug})


class SlugAlreadyExistsError(DomainError):
    """slug 冲突"""

    error_code = ErrorCode.SLUG_ALREADY_EXISTS

    def __init__(self, slug: str):
        super().__init__(f"slug '{slug}' 已被占用", details={"slug": slug})


class AuthorAlreadyExistsError(DomainError):
    """该邮箱的作者已存在"""

    error_code = ErrorCode.AUTHOR_ALREADY_EXISTS

    def __init__(self, email: str):
        super().__init__(f"邮箱 '{email}' 已被其他作者使用", details={"email": email})


class AuthorHasArticlesError(DomainError):
    """作者仍被文章引用"""

    error_code = ErrorCode.AUTHOR_HAS_ARTICLES

    def __init__(self, author_id: str, count: int):
        super().__init__(
            f"作者 {author_id} 仍有 {count} 篇文章，无法删除",
            details={"id": author_id, "count": count},
        )


class CategoryAlreadyExistsError(DomainError):
    """相同 slug 的分类已存在"""

    error_code = ErrorCode.CATEGORY_ALREADY_EXISTS

    def __init__(self, slug: str):
        super().__init__(f"slug 为 '{slug}' 的分类已存在", details={"slug": slug})


class CategoryHasChildrenError(DomainError):
    """分类仍有子分类"""

    error_code = ErrorCode.CATEGORY_HAS_CHILDREN

    def __init__(self, category_id: str, count: int):
        super().__init__(
            f"分类 {category_id} 仍有 {count} 个子分类，无法删除",
            details={"id": category_id, "count": count},
        )


class CategoryCycleError(DomainError):
    """父分类设置会形成循环"""

    error_code = ErrorCode.CATEGORY_CYCLE

    def __init__(self, category_id: str, parent_id: str):
        super().__init__(
            f"不能将 {parent_id} 设为分类 {category_id} 的父分类：会形成循环",
            details={"id": category_id, "parent_id": parent_id},
        )


class InvalidSubmissionError(DomainError):
    """提交审核被状态机拒绝"""

    def __init__(self, kind: SubmissionFailure, article_id: str):
        self.kind = kind
        super().__init__(
            error_code=kind.value,
            details={"id": article_id, "kind": kind.name.lower()},
        )


class InvalidReviewError(DomainError):
    """审核被状态机拒绝"""

    def __init__(self, kind: ReviewFailure, article_id: str, status: str | None = None):
        self.kind = kind
        details: dict[str, Any] = {"id": article_id, "kind": kind.name.lower()}
        if status is not None:
            details["status"] = status
        super().__init__(error_code=kind.value, details=details)


class ArticleAlreadyPublishedError(DomainError):
    """文章已发布"""

    error_code = ErrorCode.ARTICLE_ALREADY_PUBLISHED

    def __init__(self, article_id: str):
        super().__init__(details={"id": article_id})


class ArticleNotReadyError(DomainError):
    """文章未审核通过，不能发布"""

    error_code = ErrorCode.ARTICLE_NOT_READY

    def __init__(self, article_id: str, status: str):
        super().__init__(
            f"文章状态为 {status}，只有审核通过的文章才能发布",
            details={"id": article_id, "status": status},
        )


class PublishedArticleRequiresApprovalError(DomainError):
    """已发布的文章需要重新审核"""

    error_code = ErrorCode.PUBLISHED_ARTICLE_REQUIRES_APPROVAL

    def __init__(self, article_id: str):
        super().__init__(details={"id": article_id})


# ============ 应用层异常 ============


class ApplicationError(BlogCmsError):
    """应用层异常基类"""


class ValidationError(ApplicationError):
    """请求/命令校验异常

    violations 收集了全部违规项，便于一次性反馈给调用方。
    """

    error_code = ErrorCode.INVALID_INPUT

    def __init__(self, message: str | None = None, *, violations: list[str] | None = None):
        self.violations = list(violations or ([message] if message else []))
        super().__init__(
            message or "; ".join(self.violations) or None,
            details={"violations": self.violations},
        )


class SeoRequirementsError(ApplicationError):
    """发布前 SEO 检查未通过"""

    error_code = ErrorCode.SEO_REQUIREMENTS_NOT_MET

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__("; ".join(violations), details={"violations": violations})


class GatewayError(ApplicationError):
    """网关边界异常

    网关对外只抛出该异常；原始异常的错误码、分类与消息被保留，
    但异常类型本身不会泄露给调用方。
    """

    def __init__(
        self,
        message: str,
        *,
        gateway: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.gateway = gateway
        super().__init__(message, error_code=error_code, details=details, cause=cause)

    @property
    def status_code(self) -> int:
        """对应的 HTTP 状态码"""
        return self.category.status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["gateway"] = self.gateway
        data["status_code"] = self.status_code
        return data


# ============ 基础设施层异常 ============


class InfrastructureError(BlogCmsError):
    """基础设施异常基类"""


class StorageError(InfrastructureError):
    """存储异常"""

    error_code = ErrorCode.STORAGE_ERROR


class StorageReadError(StorageError):
    """存储读取异常"""

    error_code = ErrorCode.STORAGE_READ_ERROR


class StorageWriteError(StorageError):
    """存储写入异常"""

    error_code = ErrorCode.STORAGE_WRITE_ERROR


class DataCorruptionError(StorageError):
    """存储数据无法还原为有效的值对象"""

    error_code = ErrorCode.DATA_CORRUPTION


class ConfigError(InfrastructureError):
    """配置异常"""

    error_code = ErrorCode.CONFIG_ERROR


__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "SubmissionFailure",
    "ReviewFailure",
    "BlogCmsError",
    # 领域层
    "DomainError",
    "InvalidValueError",
    "ArticleNotFoundError",
    "AuthorNotFoundError",
    "CategoryNotFoundError",
    "ParentCategoryNotFoundError",
    "ArticleAlreadyExistsError",
    "SlugAlreadyExistsError",
    "AuthorAlreadyExistsError",
    "AuthorHasArticlesError",
    "CategoryAlreadyExistsError",
    "CategoryHasChildrenError",
    "CategoryCycleError",
    "InvalidSubmissionError",
    "InvalidReviewError",
    "ArticleAlreadyPublishedError",
    "ArticleNotReadyError",
    "PublishedArticleRequiresApprovalError",
    # 应用层
    "ApplicationError",
    "ValidationError",
    "SeoRequirementsError",
    "GatewayError",
    # 基础设施层
    "InfrastructureError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "DataCorruptionError",
    "ConfigError",
]
