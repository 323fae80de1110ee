"""作者生命周期领域服务测试"""

from datetime import timedelta

import pytest

from blog_cms.domain.entities import Author
from blog_cms.domain.events import AuthorCreated, AuthorDeleted, AuthorUpdated
from blog_cms.domain.services import AuthorCreator, AuthorDeletor, AuthorUpdater
from blog_cms.domain.value_objects import (
    AuthorBio,
    AuthorEmail,
    AuthorId,
    AuthorName,
)
from blog_cms.shared.exceptions import AuthorAlreadyExistsError, AuthorHasArticlesError


class TestAuthorCreator:
    """创建作者"""

    @pytest.mark.unit
    def test_create(self, authors, author_id, now) -> None:
        """测试创建作者"""
        outcome = AuthorCreator(authors).create(
            author_id, AuthorName("Jane Doe"), AuthorEmail("Jane@Example.com"), AuthorBio(), now
        )

        assert outcome.state.email.value == "jane@example.com"
        (event,) = outcome.events
        assert isinstance(event, AuthorCreated)
        assert event.author_name == "Jane Doe"

    @pytest.mark.unit
    def test_duplicate_email_case_insensitive(self, authors, sample_author: Author, now) -> None:
        """测试邮箱重复不区分大小写"""
        authors.add(sample_author)

        with pytest.raises(AuthorAlreadyExistsError) as exc_info:
            AuthorCreator(authors).create(
                AuthorId("6f9619ff-8b86-d011-b42d-00c04fc964ff"),
                AuthorName("Other Jane"),
                AuthorEmail("JANE@example.com"),
                AuthorBio(),
                now,
            )
        assert exc_info.value.details["email"] == "jane@example.com"


class TestAuthorUpdater:
    """修改作者"""

    @pytest.mark.unit
    def test_changed_fields(self, authors, sample_author: Author, now) -> None:
        """测试变更字段"""
        authors.add(sample_author)
        later = now + timedelta(minutes=5)

        outcome = AuthorUpdater(authors).update(
            sample_author, later, name=AuthorName("Jane Smith"), bio=sample_author.bio
        )

        assert outcome.state.name.value == "Jane Smith"
        assert outcome.state.updated_at == later
        (event,) = outcome.events
        assert isinstance(event, AuthorUpdated)
        assert event.changed_fields == ("name",)

    @pytest.mark.unit
    def test_same_email_is_not_conflict(self, authors, sample_author: Author, now) -> None:
        """测试邮箱未变不算冲突"""
        authors.add(sample_author)

        outcome = AuthorUpdater(authors).update(sample_author, now, email=AuthorEmail("JANE@example.com"))
        assert outcome.state is sample_author
        assert outcome.events == ()

    @pytest.mark.unit
    def test_email_taken_by_other(self, authors, sample_author: Author, now) -> None:
        """测试邮箱已被其他作者使用"""
        authors.add(sample_author)
        other = sample_author.evolve(
            id=AuthorId("6f9619ff-8b86-d011-b42d-00c04fc964ff"),
            email=AuthorEmail("other@example.com"),
        )
        authors.add(other)

        with pytest.raises(AuthorAlreadyExistsError):
            AuthorUpdater(authors).update(other, now, email=AuthorEmail("jane@example.com"))


class TestAuthorDeletor:
    """删除作者"""

    @pytest.mark.unit
    def test_delete_without_articles(self, authors, sample_author: Author, now) -> None:
        """测试删除没有文章的作者"""
        authors.add(sample_author)

        outcome = AuthorDeletor(authors).delete(sample_author, now)
        (event,) = outcome.events
        assert isinstance(event, AuthorDeleted)
        assert event.email == "jane@example.com"

    @pytest.mark.unit
    def test_delete_blocked_by_articles(self, authors, articles, sample_author, draft_article, now) -> None:
        """测试有文章的作者不能删除"""
        authors.add(sample_author)
        articles.save(draft_article)

        with pytest.raises(AuthorHasArticlesError) as exc_info:
            AuthorDeletor(authors).delete(sample_author, now)
        assert exc_info.value.details == {"id": sample_author.id.value, "count": 1}
