"""标识生成出站端口"""

from typing import Protocol, runtime_checkable

from ....domain.value_objects import ArticleId, AuthorId, CategoryId, CommentId


@runtime_checkable
class IdGeneratorPort(Protocol):
    """
    标识生成端口

    每种聚合一个方法，返回全新且唯一的标识。
    """

    def next_article_id(self) -> ArticleId:
        ...

    def next_author_id(self) -> AuthorId:
        ...

    def next_category_id(self) -> CategoryId:
        ...

    def next_comment_id(self) -> CommentId:
        ...
