"""测试夹具和共享配置

提供测试中常用的夹具：
- 可控时钟
- 内存文档存储与各仓储
- 记录事件的事件总线
- 使用内存存储的容器
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from blog_cms.domain.entities import Article, Author, Category
from blog_cms.domain.value_objects import (
    ArticleId,
    ArticleStatus,
    AuthorBio,
    AuthorEmail,
    AuthorId,
    AuthorName,
    CategoryId,
    CategoryName,
    CategorySlug,
    Content,
    Order,
    Slug,
    Timestamps,
    Title,
)
from blog_cms.infrastructure.adapters import (
    InMemoryEventBus,
    JsonArticleRepository,
    JsonAuthorRepository,
    JsonCategoryRepository,
    JsonDocumentStore,
    JsonEditorialCommentRepository,
)
from blog_cms.infrastructure.config import (
    AppSettings,
    Container,
    StorageSettings,
    get_settings,
    reset_container,
)

if TYPE_CHECKING:
    from collections.abc import Generator


START_TIME = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


class SteppingClock:
    """每次调用前进固定步长的时钟"""

    def __init__(self, start: datetime = START_TIME, step: timedelta = timedelta(minutes=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


# ============== 基础夹具 ==============


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """清理配置缓存与全局容器，屏蔽宿主机的 BLOG_CMS_ 环境变量"""
    for key in list(os.environ):
        if key.startswith("BLOG_CMS_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def clock() -> SteppingClock:
    """从 2024-01-15 10:00 UTC 开始、每次前进一分钟的时钟"""
    return SteppingClock()


@pytest.fixture
def now() -> datetime:
    return START_TIME


# ============== 存储夹具 ==============


@pytest.fixture
def store() -> JsonDocumentStore:
    """内存文档存储"""
    return JsonDocumentStore()


@pytest.fixture
def articles(store: JsonDocumentStore) -> JsonArticleRepository:
    return JsonArticleRepository(store)


@pytest.fixture
def authors(store: JsonDocumentStore) -> JsonAuthorRepository:
    return JsonAuthorRepository(store)


@pytest.fixture
def categories(store: JsonDocumentStore) -> JsonCategoryRepository:
    return JsonCategoryRepository(store)


@pytest.fixture
def comments(store: JsonDocumentStore) -> JsonEditorialCommentRepository:
    return JsonEditorialCommentRepository(store)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


# ============== 实体夹具 ==============


@pytest.fixture
def author_id() -> AuthorId:
    return AuthorId(str(uuid4()))


@pytest.fixture
def draft_article(author_id: AuthorId) -> Article:
    """草稿状态的示例文章"""
    return Article(
        id=ArticleId(str(uuid4())),
        title=Title("Hello World"),
        content=Content("<p>第一篇文章的正文内容。</p>"),
        slug=Slug("hello-world"),
        status=ArticleStatus.DRAFT,
        author_id=author_id,
        timestamps=Timestamps.create(START_TIME),
    )


@pytest.fixture
def sample_author(author_id: AuthorId) -> Author:
    return Author(
        id=author_id,
        name=AuthorName("Jane Doe"),
        email=AuthorEmail("jane@example.com"),
        bio=AuthorBio("技术作者"),
        timestamps=Timestamps.create(START_TIME),
    )


@pytest.fixture
def make_category():
    """按名称与 slug 构造分类的工厂"""

    def factory(name: str, slug: str, parent: Category | None = None, order: int = 0) -> Category:
        return Category(
            id=CategoryId(str(uuid4())),
            name=CategoryName(name),
            slug=CategorySlug(slug),
            timestamps=Timestamps.create(START_TIME),
            parent_id=parent.id if parent else None,
            order=Order(order),
        )

    return factory


# ============== 容器夹具 ==============


@pytest.fixture
def settings() -> AppSettings:
    """使用内存存储的配置"""
    return AppSettings(storage=StorageSettings(in_memory=True))


@pytest.fixture
def container(settings: AppSettings, clock: SteppingClock) -> Generator[Container, None, None]:
    """使用内存存储与可控时钟的容器"""
    container = Container(settings=settings, clock=clock)
    yield container
    container.close()


@pytest.fixture
def new_author(container: Container):
    """通过网关创建作者，返回作者ID"""

    def factory(name: str = "Jane Doe", email: str = "jane@example.com") -> str:
        return container.execute("author.create", {"name": name, "email": email}).id

    return factory


@pytest.fixture
def new_article(container: Container, new_author):
    """通过网关创建草稿文章，返回 ArticleResponse"""
    state: dict[str, str] = {}

    def factory(title: str = "Hello World", content: str = "<p>Body text of the article.</p>", **extra):
        if "author_id" not in extra:
            if "author_id" not in state:
                state["author_id"] = new_author()
            extra["author_id"] = state["author_id"]
        return container.execute("article.create", {"title": title, "content": content, **extra})

    return factory
