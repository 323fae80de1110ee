"""博客内容管理系统 - 编辑审核核心

管理作者、文章、分类以及文章的编辑审核工作流
（草稿 → 待审核 → 通过/驳回 → 发布）。

架构：
- 领域驱动设计 (DDD) + 六边形架构 (Hexagonal Architecture)
- CQRS 风格的应用层：Gateway 中间件管道包装 Command/Query/Handler
- 纯函数式的生命周期操作：返回新快照与领域事件

使用方式：
    blog-cms article create "My Title" "Body text" --author <AUTHOR_ID>
    blog-cms article submit <ARTICLE_ID>
    python -m blog_cms article list
"""

from .shared.constants import APP_NAME, VERSION

__version__ = VERSION
__app_name__ = APP_NAME

__all__ = ["__version__", "__app_name__"]
