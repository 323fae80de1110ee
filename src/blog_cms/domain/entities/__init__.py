"""领域实体（不可变聚合快照）"""

from .article import Article
from .author import Author
from .category import Category
from .editorial_comment import ArticleComment

__all__ = ["Article", "Author", "Category", "ArticleComment"]
