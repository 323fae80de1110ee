"""数据传输对象：网关请求与响应"""

from .article_dto import (
    AddEditorialCommentRequest,
    ApproveArticleRequest,
    ArticleListResponse,
    ArticleResponse,
    AutoSaveArticleRequest,
    CreateArticleRequest,
    DeleteArticleRequest,
    EditorialCommentListResponse,
    EditorialCommentResponse,
    GetArticleRequest,
    ListArticlesRequest,
    ListEditorialCommentsRequest,
    PublishArticleRequest,
    RejectArticleRequest,
    SubmitForReviewRequest,
    UpdateArticleRequest,
)
from .author_dto import (
    AuthorListResponse,
    AuthorResponse,
    CreateAuthorRequest,
    DeleteAuthorRequest,
    GetAuthorArticlesRequest,
    GetAuthorRequest,
    ListAuthorsRequest,
    UpdateAuthorRequest,
)
from .base import DeletionResponse, GatewayRequest, GatewayResponse
from .category_dto import (
    CategoryListResponse,
    CategoryResponse,
    CategoryTreeResponse,
    CreateCategoryRequest,
    DeleteCategoryRequest,
    GetCategoryRequest,
    GetCategoryTreeRequest,
    ListCategoriesRequest,
    UpdateCategoryRequest,
)

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "DeletionResponse",
    # 文章
    "CreateArticleRequest",
    "UpdateArticleRequest",
    "AutoSaveArticleRequest",
    "SubmitForReviewRequest",
    "ApproveArticleRequest",
    "RejectArticleRequest",
    "PublishArticleRequest",
    "DeleteArticleRequest",
    "GetArticleRequest",
    "ListArticlesRequest",
    "AddEditorialCommentRequest",
    "ListEditorialCommentsRequest",
    "ArticleResponse",
    "ArticleListResponse",
    "EditorialCommentResponse",
    "EditorialCommentListResponse",
    # 作者
    "CreateAuthorRequest",
    "UpdateAuthorRequest",
    "GetAuthorRequest",
    "DeleteAuthorRequest",
    "ListAuthorsRequest",
    "GetAuthorArticlesRequest",
    "AuthorResponse",
    "AuthorListResponse",
    # 分类
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "GetCategoryRequest",
    "DeleteCategoryRequest",
    "ListCategoriesRequest",
    "GetCategoryTreeRequest",
    "CategoryResponse",
    "CategoryListResponse",
    "CategoryTreeResponse",
]
