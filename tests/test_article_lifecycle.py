"""文章生命周期领域服务测试

覆盖创建、更新、提交审核、审核、发布与删除的状态流转规则。
领域服务是纯操作：返回新快照与事件，不写仓储。
"""

from datetime import timedelta

import pytest

from blog_cms.domain.entities import Article
from blog_cms.domain.events import (
    ArticleApproved,
    ArticleCreated,
    ArticleDeleted,
    ArticlePublished,
    ArticleRejected,
    ArticleSubmittedForReview,
    ArticleUpdated,
    Outcome,
)
from blog_cms.domain.services import (
    ArticleCreator,
    ArticleDeleter,
    ArticlePublisher,
    ArticleReviewer,
    ArticleSubmitter,
    ArticleUpdater,
)
from blog_cms.domain.value_objects import ArticleId, ArticleStatus, Content, Slug, Title
from blog_cms.shared.exceptions import (
    ArticleAlreadyExistsError,
    ArticleAlreadyPublishedError,
    ArticleNotReadyError,
    InvalidReviewError,
    InvalidSubmissionError,
    InvalidValueError,
    PublishedArticleRequiresApprovalError,
    ReviewFailure,
    SlugAlreadyExistsError,
    SubmissionFailure,
)
from blog_cms.shared.utils import slugify

HOUR = timedelta(hours=1)


def _with_status(article: Article, status: ArticleStatus, now) -> Article:
    """构造指定状态的快照"""
    if status in (ArticleStatus.PUBLISHED, ArticleStatus.ARCHIVED):
        return article.evolve(status=status, published_at=now)
    return article.evolve(status=status)


class TestArticleEntity:
    """文章快照不变式"""

    @pytest.mark.unit
    def test_published_requires_published_at(self, draft_article: Article) -> None:
        """测试已发布文章必须有发布时间"""
        with pytest.raises(InvalidValueError):
            draft_article.evolve(status=ArticleStatus.PUBLISHED)

    @pytest.mark.unit
    def test_draft_cannot_have_published_at(self, draft_article: Article, now) -> None:
        """测试草稿不能有发布时间"""
        with pytest.raises(InvalidValueError):
            draft_article.evolve(published_at=now)

    @pytest.mark.unit
    def test_published_at_not_before_creation(self, draft_article: Article, now) -> None:
        """测试发布时间不能早于创建时间"""
        with pytest.raises(InvalidValueError):
            draft_article.evolve(status=ArticleStatus.PUBLISHED, published_at=now - HOUR)

    @pytest.mark.unit
    def test_evolve_returns_new_snapshot(self, draft_article: Article) -> None:
        """测试 evolve 返回新的快照"""
        updated = draft_article.evolve(title=Title("Another title"))
        assert updated is not draft_article
        assert draft_article.title.value == "Hello World"


class TestOutcome:
    """Outcome 事件释放"""

    @pytest.mark.unit
    def test_release_events_drains_buffer(self, draft_article: Article, now) -> None:
        """测试释放事件后缓冲区清空"""
        outcome = ArticleSubmitter().submit(draft_article, now)

        assert len(outcome.events) == 1
        first = outcome.release_events()
        assert len(first) == 1
        assert outcome.release_events() == []
        assert outcome.events == ()

    @pytest.mark.unit
    def test_event_to_dict_serializes_times(self, draft_article: Article, now) -> None:
        """测试事件转字典时序列化时间"""
        event = ArticleSubmitter().submit(draft_article, now).events[0]
        data = event.to_dict()
        assert data["name"] == "article.submitted_for_review"
        assert data["submitted_at"] == now.isoformat()
        assert event.occurred_at == now


class TestArticleCreator:
    """创建文章"""

    @pytest.mark.unit
    def test_creates_draft(self, articles, author_id, now) -> None:
        """测试创建草稿文章"""
        article_id = ArticleId("6f9619ff-8b86-d011-b42d-00c04fc964ff")
        outcome = ArticleCreator(articles).create(
            article_id=article_id,
            title=Title("Hello World"),
            content=Content("<p>Body</p>"),
            slug=Slug("hello-world"),
            author_id=author_id,
            at=now,
        )

        article = outcome.state
        assert article.status is ArticleStatus.DRAFT
        assert article.published_at is None
        assert article.created_at == article.updated_at == now

        (event,) = outcome.events
        assert isinstance(event, ArticleCreated)
        assert event.article_id == article_id.value
        assert event.status == "draft"

    @pytest.mark.unit
    def test_does_not_persist(self, articles, author_id, now) -> None:
        """测试创建不写入仓储"""
        ArticleCreator(articles).create(
            ArticleId("6f9619ff-8b86-d011-b42d-00c04fc964ff"),
            Title("Hello World"),
            Content("Body"),
            Slug("hello-world"),
            author_id,
            now,
        )
        assert not articles.exists_with_slug("hello-world")

    @pytest.mark.unit
    def test_duplicate_slug(self, articles, draft_article: Article, author_id, now) -> None:
        """测试 slug 重复"""
        articles.save(draft_article)

        with pytest.raises(ArticleAlreadyExistsError) as exc_info:
            ArticleCreator(articles).create(
                ArticleId("6f9619ff-8b86-d011-b42d-00c04fc964ff"),
                Title("Hello World again"),
                Content("Body"),
                Slug("hello-world"),
                author_id,
                now,
            )
        assert exc_info.value.details == {"slug": "hello-world"}


class TestArticleUpdater:
    """更新文章"""

    @pytest.fixture
    def updater(self, articles) -> ArticleUpdater:
        return ArticleUpdater(articles, slugify)

    @pytest.mark.unit
    def test_title_change_recomputes_slug(self, updater, draft_article: Article, now) -> None:
        """测试修改标题重新计算 slug"""
        outcome = updater.update(draft_article, now + HOUR, title=Title("Brand New Title"))

        assert outcome.state.slug.value == "brand-new-title"
        assert outcome.state.updated_at == now + HOUR
        (event,) = outcome.events
        assert isinstance(event, ArticleUpdated)
        assert event.changed_fields == ("title",)

    @pytest.mark.unit
    def test_content_change_keeps_slug(self, updater, draft_article: Article, now) -> None:
        """测试只改正文保留 slug"""
        outcome = updater.update(draft_article, now, content=Content("<p>New body</p>"))

        assert outcome.state.slug == draft_article.slug
        assert outcome.events[0].changed_fields == ("content",)

    @pytest.mark.unit
    def test_changed_fields_order(self, updater, draft_article: Article, now) -> None:
        """测试变更字段的顺序"""
        outcome = updater.update(
            draft_article, now, title=Title("Brand New Title"), content=Content("New body")
        )
        assert outcome.events[0].changed_fields == ("title", "content")

    @pytest.mark.unit
    def test_no_change_returns_same_snapshot(self, updater, draft_article: Article, now) -> None:
        """测试无变更时返回原快照"""
        outcome = updater.update(
            draft_article, now + HOUR, title=draft_article.title, content=draft_article.content
        )
        assert outcome.state is draft_article
        assert outcome.events == ()

    @pytest.mark.unit
    def test_published_rejected_even_without_changes(self, updater, draft_article: Article, now) -> None:
        """测试已发布文章即使无变更也拒绝修改"""
        published = _with_status(draft_article, ArticleStatus.PUBLISHED, now)

        with pytest.raises(PublishedArticleRequiresApprovalError):
            updater.update(published, now, title=published.title)

    @pytest.mark.unit
    def test_slug_conflict(self, articles, updater, draft_article: Article, now) -> None:
        """测试新 slug 被占用"""
        other = draft_article.evolve(
            id=ArticleId("6f9619ff-8b86-d011-b42d-00c04fc964ff"),
            title=Title("Taken Title"),
            slug=Slug("taken-title"),
        )
        articles.save(other)

        with pytest.raises(SlugAlreadyExistsError):
            updater.update(draft_article, now, title=Title("Taken Title"))

    @pytest.mark.unit
    def test_unsluggable_title_keeps_slug(self, updater, draft_article: Article, now) -> None:
        """测试无法生成 slug 的标题保留原 slug"""
        outcome = updater.update(draft_article, now, title=Title("!!!!!!"))
        assert outcome.state.slug == draft_article.slug


class TestArticleSubmitter:
    """提交审核"""

    @pytest.mark.unit
    def test_draft_submitted(self, draft_article: Article, now) -> None:
        """测试草稿提交审核"""
        outcome = ArticleSubmitter().submit(draft_article, now + HOUR)

        assert outcome.state.status is ArticleStatus.PENDING_REVIEW
        assert outcome.state.submitted_at == now + HOUR
        assert isinstance(outcome.events[0], ArticleSubmittedForReview)

    @pytest.mark.unit
    def test_resubmission_clears_review(self, draft_article: Article, now) -> None:
        """测试重新提交清空审核信息"""
        rejected = draft_article.evolve(
            status=ArticleStatus.REJECTED,
            reviewer_id="editor-1",
            reviewed_at=now,
            review_reason="needs work",
        )
        submitted = ArticleSubmitter().submit(rejected, now + HOUR).state

        assert submitted.status is ArticleStatus.PENDING_REVIEW
        assert submitted.reviewer_id is None
        assert submitted.reviewed_at is None
        assert submitted.review_reason is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("status", "failure"),
        [
            (ArticleStatus.PENDING_REVIEW, SubmissionFailure.ALREADY_PENDING_REVIEW),
            (ArticleStatus.APPROVED, SubmissionFailure.ALREADY_APPROVED),
            (ArticleStatus.PUBLISHED, SubmissionFailure.CANNOT_SUBMIT_PUBLISHED),
            (ArticleStatus.ARCHIVED, SubmissionFailure.CANNOT_SUBMIT_ARCHIVED),
        ],
    )
    def test_rejected_states(self, draft_article: Article, now, status, failure) -> None:
        """测试不允许提交的状态"""
        article = _with_status(draft_article, status, now)

        with pytest.raises(InvalidSubmissionError) as exc_info:
            ArticleSubmitter().submit(article, now)
        assert exc_info.value.kind is failure
        assert exc_info.value.error_code is failure.value


class TestArticleReviewer:
    """审核"""

    @pytest.fixture
    def pending(self, draft_article: Article) -> Article:
        return draft_article.evolve(status=ArticleStatus.PENDING_REVIEW)

    @pytest.mark.unit
    def test_approve(self, pending: Article, now) -> None:
        """测试审核通过"""
        outcome = ArticleReviewer().approve(pending, " editor-1 ", now, reason="Looks good")

        assert outcome.state.status is ArticleStatus.APPROVED
        assert outcome.state.reviewer_id == "editor-1"
        assert outcome.state.review_reason == "Looks good"
        (event,) = outcome.events
        assert isinstance(event, ArticleApproved)
        assert event.reason == "Looks good"

    @pytest.mark.unit
    def test_reject(self, pending: Article, now) -> None:
        """测试审核驳回"""
        outcome = ArticleReviewer().reject(pending, "editor-1", "Needs sources", now)

        assert outcome.state.status is ArticleStatus.REJECTED
        (event,) = outcome.events
        assert isinstance(event, ArticleRejected)
        assert event.reason == "Needs sources"

    @pytest.mark.unit
    def test_blank_reviewer(self, pending: Article, now) -> None:
        """测试审核人为空"""
        with pytest.raises(InvalidValueError, match="审核人"):
            ArticleReviewer().approve(pending, "  ", now)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("status", "failure"),
        [
            (ArticleStatus.DRAFT, ReviewFailure.INVALID_STATUS),
            (ArticleStatus.REJECTED, ReviewFailure.INVALID_STATUS),
            (ArticleStatus.APPROVED, ReviewFailure.ALREADY_APPROVED),
            (ArticleStatus.PUBLISHED, ReviewFailure.CANNOT_REVIEW_PUBLISHED),
            (ArticleStatus.ARCHIVED, ReviewFailure.CANNOT_REVIEW_ARCHIVED),
        ],
    )
    def test_rejected_states(self, draft_article: Article, now, status, failure) -> None:
        """测试不允许审核的状态"""
        article = _with_status(draft_article, status, now)

        with pytest.raises(InvalidReviewError) as exc_info:
            ArticleReviewer().approve(article, "editor-1", now)
        assert exc_info.value.kind is failure
        assert exc_info.value.details["status"] == status.value


class TestArticlePublisher:
    """发布"""

    @pytest.fixture
    def approved(self, draft_article: Article) -> Article:
        return draft_article.evolve(status=ArticleStatus.APPROVED)

    @pytest.mark.unit
    def test_publish_now(self, approved: Article, now) -> None:
        """测试立即发布"""
        outcome = ArticlePublisher().publish(approved, now + HOUR)

        assert outcome.state.is_published
        assert outcome.state.published_at == now + HOUR
        (event,) = outcome.events
        assert isinstance(event, ArticlePublished)
        assert event.published_at == now + HOUR

    @pytest.mark.unit
    def test_scheduled_publish_time(self, approved: Article, now) -> None:
        """测试定时发布时间"""
        future = now + timedelta(days=3)
        outcome = ArticlePublisher().publish(approved, now, publish_at=future)

        assert outcome.state.published_at == future
        assert outcome.state.updated_at == now

    @pytest.mark.unit
    def test_publish_before_creation_rejected(self, approved: Article, now) -> None:
        """测试发布时间早于创建时间被拒绝"""
        with pytest.raises(InvalidValueError):
            ArticlePublisher().publish(approved, now, publish_at=now - HOUR)

    @pytest.mark.unit
    def test_already_published(self, approved: Article, now) -> None:
        """测试重复发布"""
        published = _with_status(approved, ArticleStatus.PUBLISHED, now)
        with pytest.raises(ArticleAlreadyPublishedError):
            ArticlePublisher().publish(published, now)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "status", [ArticleStatus.DRAFT, ArticleStatus.PENDING_REVIEW, ArticleStatus.REJECTED]
    )
    def test_not_ready(self, draft_article: Article, now, status) -> None:
        """测试未审核通过不能发布"""
        with pytest.raises(ArticleNotReadyError) as exc_info:
            ArticlePublisher().publish(draft_article.evolve(status=status), now)
        assert exc_info.value.details["status"] == status.value


class TestArticleDeleter:
    """删除"""

    @pytest.mark.unit
    @pytest.mark.parametrize("status", list(ArticleStatus))
    def test_any_status_can_be_deleted(self, draft_article: Article, now, status) -> None:
        """测试任意状态都可删除"""
        article = _with_status(draft_article, status, now)
        outcome: Outcome[Article] = ArticleDeleter().delete(article, now, deleted_by="admin")

        (event,) = outcome.events
        assert isinstance(event, ArticleDeleted)
        assert event.slug == "hello-world"
        assert event.deleted_by == "admin"
