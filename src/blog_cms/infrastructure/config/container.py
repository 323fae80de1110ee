"""依赖注入容器 - 组装仓储、适配器与全部网关"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from loguru import logger

from ...application.commands import (
    AddEditorialCommentHandler,
    AutoSaveArticleHandler,
    CreateArticleHandler,
    CreateAuthorHandler,
    CreateCategoryHandler,
    DeleteArticleHandler,
    DeleteAuthorHandler,
    DeleteCategoryHandler,
    PublishArticleHandler,
    ReviewArticleHandler,
    SubmitForReviewHandler,
    UpdateArticleHandler,
    UpdateAuthorHandler,
    UpdateCategoryHandler,
)
from ...application.dto import (
    AddEditorialCommentRequest,
    ApproveArticleRequest,
    AutoSaveArticleRequest,
    CreateArticleRequest,
    CreateAuthorRequest,
    CreateCategoryRequest,
    DeleteArticleRequest,
    DeleteAuthorRequest,
    DeleteCategoryRequest,
    GetArticleRequest,
    GetAuthorArticlesRequest,
    GetAuthorRequest,
    GetCategoryRequest,
    GetCategoryTreeRequest,
    ListArticlesRequest,
    ListAuthorsRequest,
    ListCategoriesRequest,
    ListEditorialCommentsRequest,
    PublishArticleRequest,
    RejectArticleRequest,
    SubmitForReviewRequest,
    UpdateArticleRequest,
    UpdateAuthorRequest,
    UpdateCategoryRequest,
)
from ...application.gateway import Gateway, SeoValidation, build_gateway
from ...application.gateway.processors import (
    AddEditorialCommentProcessor,
    CategoryTreeProcessor,
    CreateArticleProcessor,
    CreateAuthorProcessor,
    CreateCategoryProcessor,
    ListEditorialCommentsProcessor,
    approve_article_processor,
    author_articles_processor,
    auto_save_article_processor,
    delete_article_processor,
    delete_author_processor,
    delete_category_processor,
    get_article_processor,
    get_author_processor,
    get_category_processor,
    list_articles_processor,
    list_authors_processor,
    list_categories_processor,
    publish_article_processor,
    reject_article_processor,
    submit_for_review_processor,
    update_article_processor,
    update_author_processor,
    update_category_processor,
)
from ...application.queries import (
    GetArticleHandler,
    GetAuthorArticlesHandler,
    GetAuthorHandler,
    GetCategoryHandler,
    GetCategoryTreeHandler,
    ListArticlesHandler,
    ListAuthorsHandler,
    ListCategoriesHandler,
    ListEditorialCommentsHandler,
)
from ...domain.services import (
    ArticleCreator,
    ArticleDeleter,
    ArticlePublisher,
    ArticleReviewer,
    ArticleSubmitter,
    ArticleUpdater,
    AuthorCreator,
    AuthorDeletor,
    AuthorUpdater,
    CategoryCreator,
    CategoryDeleter,
    CategoryTreeBuilder,
    CategoryUpdater,
    EditorialCommenter,
)
from ...shared.exceptions import ErrorCode, GatewayError, ValidationError
from ..adapters import (
    CatalogTranslator,
    InMemoryEventBus,
    JsonArticleRepository,
    JsonAuthorRepository,
    JsonCategoryRepository,
    JsonDocumentStore,
    JsonEditorialCommentRepository,
    UniqueSlugGenerator,
    UuidIdGenerator,
)
from .settings import AppSettings, get_settings

if TYPE_CHECKING:
    from ...application.dto import GatewayRequest, GatewayResponse
    from ...application.ports.outbound import Clock


# 网关名称 → 请求类型
REQUEST_TYPES: dict[str, type[GatewayRequest]] = {
    "article.create": CreateArticleRequest,
    "article.update": UpdateArticleRequest,
    "article.auto_save": AutoSaveArticleRequest,
    "article.submit_for_review": SubmitForReviewRequest,
    "article.approve": ApproveArticleRequest,
    "article.reject": RejectArticleRequest,
    "article.publish": PublishArticleRequest,
    "article.delete": DeleteArticleRequest,
    "article.get": GetArticleRequest,
    "article.list": ListArticlesRequest,
    "article.add_editorial_comment": AddEditorialCommentRequest,
    "article.list_editorial_comments": ListEditorialCommentsRequest,
    "author.create": CreateAuthorRequest,
    "author.update": UpdateAuthorRequest,
    "author.delete": DeleteAuthorRequest,
    "author.get": GetAuthorRequest,
    "author.list": ListAuthorsRequest,
    "author.articles": GetAuthorArticlesRequest,
    "category.create": CreateCategoryRequest,
    "category.update": UpdateCategoryRequest,
    "category.delete": DeleteCategoryRequest,
    "category.get": GetCategoryRequest,
    "category.list": ListCategoriesRequest,
    "category.tree": GetCategoryTreeRequest,
}


@dataclass
class Container:
    """
    依赖注入容器

    负责创建和管理仓储、事件总线、翻译器与全部网关。
    clock 为 None 时各处理器使用当前 UTC 时间。
    """

    settings: AppSettings = field(default_factory=get_settings)
    clock: Clock | None = None

    # 线程安全锁（保护懒加载属性的初始化，允许嵌套）
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    _store: JsonDocumentStore | None = field(default=None, init=False)
    _articles: JsonArticleRepository | None = field(default=None, init=False)
    _authors: JsonAuthorRepository | None = field(default=None, init=False)
    _categories: JsonCategoryRepository | None = field(default=None, init=False)
    _comments: JsonEditorialCommentRepository | None = field(default=None, init=False)
    _event_bus: InMemoryEventBus | None = field(default=None, init=False)
    _translator: CatalogTranslator | None = field(default=None, init=False)
    _gateways: dict[str, Gateway] | None = field(default=None, init=False)

    @property
    def store(self) -> JsonDocumentStore:
        """获取文档存储"""
        self._init_storage()
        assert self._store is not None
        return self._store

    @property
    def articles(self) -> JsonArticleRepository:
        self._init_storage()
        assert self._articles is not None
        return self._articles

    @property
    def authors(self) -> JsonAuthorRepository:
        self._init_storage()
        assert self._authors is not None
        return self._authors

    @property
    def categories(self) -> JsonCategoryRepository:
        self._init_storage()
        assert self._categories is not None
        return self._categories

    @property
    def comments(self) -> JsonEditorialCommentRepository:
        self._init_storage()
        assert self._comments is not None
        return self._comments

    @property
    def event_bus(self) -> InMemoryEventBus:
        if self._event_bus is None:
            with self._lock:
                if self._event_bus is None:
                    self._event_bus = InMemoryEventBus()
        return self._event_bus

    @property
    def translator(self) -> CatalogTranslator:
        if self._translator is None:
            with self._lock:
                if self._translator is None:
                    self._translator = CatalogTranslator(
                        self.settings.locale, self.settings.translations_file
                    )
        return self._translator

    @property
    def gateways(self) -> dict[str, Gateway]:
        """获取全部网关（按名称）"""
        if self._gateways is None:
            with self._lock:
                if self._gateways is None:
                    self._gateways = self._create_gateways()
        return self._gateways

    def gateway(self, name: str) -> Gateway:
        """
        按名称获取网关

        Raises:
            GatewayError: 未注册的网关
        """
        try:
            return self.gateways[name]
        except KeyError:
            raise GatewayError(
                f"未注册的网关: {name}",
                gateway=name,
                error_code=ErrorCode.GATEWAY_NOT_FOUND,
                details={"name": name},
            ) from None

    def execute(self, name: str, data: dict[str, Any]) -> GatewayResponse:
        """
        用字典构造请求并调用网关

        请求构造失败同样以 GatewayError 报告。
        """
        gateway = self.gateway(name)
        try:
            request = REQUEST_TYPES[name].from_data(data)
        except ValidationError as e:
            raise GatewayError(
                e.user_message,
                gateway=name,
                error_code=e.error_code,
                details=e.details,
                cause=e,
            ) from e
        return gateway(request)

    def close(self) -> None:
        """释放缓存的组件"""
        with self._lock:
            self._gateways = None
            self._store = None
            self._articles = self._authors = self._categories = self._comments = None

    # ---------------- 组装 ----------------

    def _init_storage(self) -> None:
        """创建文档存储与各仓储"""
        if self._store is not None:
            return
        with self._lock:
            if self._store is None:
                store = JsonDocumentStore(self.settings.storage.resolve_data_file())
                self._articles = JsonArticleRepository(store)
                self._authors = JsonAuthorRepository(store)
                self._categories = JsonCategoryRepository(store)
                self._comments = JsonEditorialCommentRepository(store)
                self._store = store
                logger.debug(f"文档存储已创建: {store.path or '内存'}")

    def _create_gateways(self) -> dict[str, Gateway]:
        gateways = {
            **self._article_gateways(),
            **self._author_gateways(),
            **self._category_gateways(),
        }
        logger.info(f"已注册 {len(gateways)} 个网关")
        return gateways

    def _build(self, name: str, processor: Any, extra: tuple = ()) -> Gateway:
        return build_gateway(name, processor, translator=self.translator, extra=extra)

    def _article_gateways(self) -> dict[str, Gateway]:
        articles, comments = self.articles, self.comments
        bus, clock = self.event_bus, self.clock
        ids = UuidIdGenerator()
        slugs = UniqueSlugGenerator(articles, self.categories)
        editorial = self.settings.editorial

        updater = ArticleUpdater(articles, slugs.slugify)
        reviewer = ReviewArticleHandler(ArticleReviewer(), articles, bus, clock)

        publish_checks: tuple = ()
        if editorial.seo_checks:
            publish_checks = (
                SeoValidation(
                    articles,
                    min_title_length=editorial.seo_min_title_length,
                    min_content_length=editorial.seo_min_content_length,
                ),
            )

        return {
            "article.create": self._build(
                "article.create",
                CreateArticleProcessor(
                    CreateArticleHandler(ArticleCreator(articles), articles, bus, clock),
                    ids,
                    slugs,
                    auto_suffix=editorial.auto_suffix_slugs,
                ),
            ),
            "article.update": self._build(
                "article.update",
                update_article_processor(UpdateArticleHandler(updater, articles, bus, clock)),
            ),
            "article.auto_save": self._build(
                "article.auto_save",
                auto_save_article_processor(AutoSaveArticleHandler(updater, articles, bus, clock)),
            ),
            "article.submit_for_review": self._build(
                "article.submit_for_review",
                submit_for_review_processor(
                    SubmitForReviewHandler(ArticleSubmitter(), articles, bus, clock)
                ),
            ),
            "article.approve": self._build("article.approve", approve_article_processor(reviewer)),
            "article.reject": self._build("article.reject", reject_article_processor(reviewer)),
            "article.publish": self._build(
                "article.publish",
                publish_article_processor(PublishArticleHandler(ArticlePublisher(), articles, bus, clock)),
                extra=publish_checks,
            ),
            "article.delete": self._build(
                "article.delete",
                delete_article_processor(DeleteArticleHandler(ArticleDeleter(), articles, bus, clock)),
            ),
            "article.get": self._build("article.get", get_article_processor(GetArticleHandler(articles))),
            "article.list": self._build(
                "article.list", list_articles_processor(ListArticlesHandler(articles))
            ),
            "article.add_editorial_comment": self._build(
                "article.add_editorial_comment",
                AddEditorialCommentProcessor(
                    AddEditorialCommentHandler(EditorialCommenter(), articles, comments, bus, clock),
                    ids,
                ),
            ),
            "article.list_editorial_comments": self._build(
                "article.list_editorial_comments",
                ListEditorialCommentsProcessor(ListEditorialCommentsHandler(articles, comments)),
            ),
        }

    def _author_gateways(self) -> dict[str, Gateway]:
        authors, articles = self.authors, self.articles
        bus, clock = self.event_bus, self.clock

        return {
            "author.create": self._build(
                "author.create",
                CreateAuthorProcessor(
                    CreateAuthorHandler(AuthorCreator(authors), authors, bus, clock), UuidIdGenerator()
                ),
            ),
            "author.update": self._build(
                "author.update",
                update_author_processor(UpdateAuthorHandler(AuthorUpdater(authors), authors, bus, clock)),
            ),
            "author.delete": self._build(
                "author.delete",
                delete_author_processor(DeleteAuthorHandler(AuthorDeletor(authors), authors, bus, clock)),
            ),
            "author.get": self._build("author.get", get_author_processor(GetAuthorHandler(authors))),
            "author.list": self._build("author.list", list_authors_processor(ListAuthorsHandler(authors))),
            "author.articles": self._build(
                "author.articles",
                author_articles_processor(GetAuthorArticlesHandler(authors, articles)),
            ),
        }

    def _category_gateways(self) -> dict[str, Gateway]:
        categories = self.categories
        bus, clock = self.event_bus, self.clock
        slugs = UniqueSlugGenerator(self.articles, categories)

        return {
            "category.create": self._build(
                "category.create",
                CreateCategoryProcessor(
                    CreateCategoryHandler(CategoryCreator(categories), categories, bus, clock),
                    UuidIdGenerator(),
                    slugs,
                ),
            ),
            "category.update": self._build(
                "category.update",
                update_category_processor(
                    UpdateCategoryHandler(CategoryUpdater(categories), categories, bus, clock)
                ),
            ),
            "category.delete": self._build(
                "category.delete",
                delete_category_processor(
                    DeleteCategoryHandler(CategoryDeleter(categories), categories, bus, clock)
                ),
            ),
            "category.get": self._build(
                "category.get", get_category_processor(GetCategoryHandler(categories))
            ),
            "category.list": self._build(
                "category.list", list_categories_processor(ListCategoriesHandler(categories))
            ),
            "category.tree": self._build(
                "category.tree",
                CategoryTreeProcessor(
                    GetCategoryTreeHandler(CategoryTreeBuilder(categories)),
                    self.settings.editorial.category_tree_max_depth,
                ),
            ),
        }


# 全局容器实例
_container: Container | None = None


def get_container() -> Container:
    """获取全局容器实例"""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """重置容器（用于测试）"""
    global _container
    if _container is not None:
        _container.close()
    _container = None
