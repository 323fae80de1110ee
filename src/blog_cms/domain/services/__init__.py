"""领域服务：无状态的生命周期操作

每个操作接收当前快照与输入，返回 Outcome（新快照 + 事件），不做持久化。
"""

from .article_creator import ArticleCreator
from .article_deleter import ArticleDeleter
from .article_publisher import ArticlePublisher
from .article_reviewer import ArticleReviewer
from .article_submitter import ArticleSubmitter
from .article_updater import ArticleUpdater
from .author_lifecycle import AuthorCreator, AuthorDeletor, AuthorUpdater
from .category_lifecycle import UNCHANGED, CategoryCreator, CategoryDeleter, CategoryUpdater
from .category_tree import CategoryNode, CategoryTreeBuilder
from .editorial_commenter import EditorialCommenter

__all__ = [
    # 文章
    "ArticleCreator",
    "ArticleUpdater",
    "ArticleSubmitter",
    "ArticleReviewer",
    "ArticlePublisher",
    "ArticleDeleter",
    "EditorialCommenter",
    # 作者
    "AuthorCreator",
    "AuthorUpdater",
    "AuthorDeletor",
    # 分类
    "CategoryCreator",
    "CategoryUpdater",
    "CategoryDeleter",
    "CategoryTreeBuilder",
    "CategoryNode",
    "UNCHANGED",
]
