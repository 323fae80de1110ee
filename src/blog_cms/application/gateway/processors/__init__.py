"""网关处理器（管道的终端中间件）"""

from .article import (
    AddEditorialCommentProcessor,
    CreateArticleProcessor,
    ListEditorialCommentsProcessor,
    approve_article_processor,
    auto_save_article_processor,
    delete_article_processor,
    get_article_processor,
    list_articles_processor,
    publish_article_processor,
    reject_article_processor,
    submit_for_review_processor,
    update_article_processor,
)
from .author import (
    CreateAuthorProcessor,
    author_articles_processor,
    delete_author_processor,
    get_author_processor,
    list_authors_processor,
    update_author_processor,
)
from .base import Processor
from .category import (
    CategoryTreeProcessor,
    CreateCategoryProcessor,
    delete_category_processor,
    get_category_processor,
    list_categories_processor,
    update_category_processor,
)

__all__ = [
    "Processor",
    # 文章
    "CreateArticleProcessor",
    "AddEditorialCommentProcessor",
    "ListEditorialCommentsProcessor",
    "update_article_processor",
    "auto_save_article_processor",
    "submit_for_review_processor",
    "approve_article_processor",
    "reject_article_processor",
    "publish_article_processor",
    "delete_article_processor",
    "get_article_processor",
    "list_articles_processor",
    # 作者
    "CreateAuthorProcessor",
    "update_author_processor",
    "delete_author_processor",
    "get_author_processor",
    "list_authors_processor",
    "author_articles_processor",
    # 分类
    "CreateCategoryProcessor",
    "CategoryTreeProcessor",
    "update_category_processor",
    "delete_category_processor",
    "get_category_processor",
    "list_categories_processor",
]
