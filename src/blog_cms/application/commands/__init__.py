"""命令与命令处理器"""

from .article_commands import (
    AddEditorialCommentCommand,
    AddEditorialCommentHandler,
    ApproveArticleCommand,
    AutoSaveArticleCommand,
    AutoSaveArticleHandler,
    CreateArticleCommand,
    CreateArticleHandler,
    DeleteArticleCommand,
    DeleteArticleHandler,
    PublishArticleCommand,
    PublishArticleHandler,
    RejectArticleCommand,
    ReviewArticleHandler,
    SubmitForReviewCommand,
    SubmitForReviewHandler,
    UpdateArticleCommand,
    UpdateArticleHandler,
)
from .author_commands import (
    CreateAuthorCommand,
    CreateAuthorHandler,
    DeleteAuthorCommand,
    DeleteAuthorHandler,
    UpdateAuthorCommand,
    UpdateAuthorHandler,
)
from .base import CommandHandler
from .category_commands import (
    CreateCategoryCommand,
    CreateCategoryHandler,
    DeleteCategoryCommand,
    DeleteCategoryHandler,
    UpdateCategoryCommand,
    UpdateCategoryHandler,
)

__all__ = [
    "CommandHandler",
    # 文章
    "CreateArticleCommand",
    "CreateArticleHandler",
    "UpdateArticleCommand",
    "UpdateArticleHandler",
    "AutoSaveArticleCommand",
    "AutoSaveArticleHandler",
    "SubmitForReviewCommand",
    "SubmitForReviewHandler",
    "ApproveArticleCommand",
    "RejectArticleCommand",
    "ReviewArticleHandler",
    "PublishArticleCommand",
    "PublishArticleHandler",
    "DeleteArticleCommand",
    "DeleteArticleHandler",
    "AddEditorialCommentCommand",
    "AddEditorialCommentHandler",
    # 作者
    "CreateAuthorCommand",
    "CreateAuthorHandler",
    "UpdateAuthorCommand",
    "UpdateAuthorHandler",
    "DeleteAuthorCommand",
    "DeleteAuthorHandler",
    # 分类
    "CreateCategoryCommand",
    "CreateCategoryHandler",
    "UpdateCategoryCommand",
    "UpdateCategoryHandler",
    "DeleteCategoryCommand",
    "DeleteCategoryHandler",
]
