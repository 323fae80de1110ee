"""查询与查询处理器（只读，不产生事件）"""

from .article_queries import (
    GetArticleHandler,
    GetArticleQuery,
    ListArticlesHandler,
    ListArticlesQuery,
    ListEditorialCommentsHandler,
    ListEditorialCommentsQuery,
)
from .author_queries import (
    GetAuthorArticlesHandler,
    GetAuthorArticlesQuery,
    GetAuthorHandler,
    GetAuthorQuery,
    ListAuthorsHandler,
    ListAuthorsQuery,
)
from .category_queries import (
    GetCategoryHandler,
    GetCategoryQuery,
    GetCategoryTreeHandler,
    GetCategoryTreeQuery,
    ListCategoriesHandler,
    ListCategoriesQuery,
)

__all__ = [
    "GetArticleQuery",
    "GetArticleHandler",
    "ListArticlesQuery",
    "ListArticlesHandler",
    "ListEditorialCommentsQuery",
    "ListEditorialCommentsHandler",
    "GetAuthorQuery",
    "GetAuthorHandler",
    "ListAuthorsQuery",
    "ListAuthorsHandler",
    "GetAuthorArticlesQuery",
    "GetAuthorArticlesHandler",
    "GetCategoryQuery",
    "GetCategoryHandler",
    "ListCategoriesQuery",
    "ListCategoriesHandler",
    "GetCategoryTreeQuery",
    "GetCategoryTreeHandler",
]
