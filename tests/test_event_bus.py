"""进程内事件总线测试"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from blog_cms.domain.events import AuthorCreated, AuthorDeleted
from blog_cms.infrastructure.adapters import InMemoryEventBus

WHEN = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def created(author_id: str = "a1") -> AuthorCreated:
    return AuthorCreated(author_id=author_id, author_name="Jane Doe", email="jane@example.com", created_at=WHEN)


def deleted(author_id: str = "a1") -> AuthorDeleted:
    return AuthorDeleted(author_id=author_id, email="jane@example.com", deleted_at=WHEN)


class TestInMemoryEventBus:
    """事件订阅与发布"""

    @pytest.mark.unit
    def test_subscribers_by_name(self, event_bus: InMemoryEventBus) -> None:
        """测试按事件名订阅"""
        on_created = Mock()
        on_deleted = Mock()
        event_bus.subscribe("author.created", on_created)
        event_bus.subscribe("author.deleted", on_deleted)

        event = created()
        event_bus.publish(event)

        on_created.assert_called_once_with(event)
        on_deleted.assert_not_called()

    @pytest.mark.unit
    def test_call_order(self, event_bus: InMemoryEventBus) -> None:
        """测试订阅者调用顺序"""
        calls: list[str] = []
        event_bus.subscribe("*", lambda event: calls.append("wildcard"))
        event_bus.subscribe("author.created", lambda event: calls.append("first"))
        event_bus.subscribe("author.created", lambda event: calls.append("second"))

        event_bus.publish(created())
        assert calls == ["first", "second", "wildcard"]

    @pytest.mark.unit
    def test_wildcard_receives_all(self, event_bus: InMemoryEventBus) -> None:
        """测试通配符订阅接收全部事件"""
        seen: list[str] = []
        event_bus.subscribe("*", lambda event: seen.append(event.name))

        event_bus.publish(created())
        event_bus.publish(deleted())
        assert seen == ["author.created", "author.deleted"]

    @pytest.mark.unit
    def test_unsubscribe(self, event_bus: InMemoryEventBus) -> None:
        """测试取消订阅"""
        callback = Mock()
        unsubscribe = event_bus.subscribe("author.created", callback)

        unsubscribe()
        unsubscribe()
        event_bus.publish(created())
        callback.assert_not_called()

    @pytest.mark.unit
    def test_failing_subscriber_isolated(self, event_bus: InMemoryEventBus) -> None:
        """订阅者异常不影响后续订阅者与发布方"""
        after = Mock()
        event_bus.subscribe("author.created", Mock(side_effect=RuntimeError("boom")))
        event_bus.subscribe("author.created", after)

        event_bus.publish(created())
        after.assert_called_once()
        assert len(event_bus.published) == 1

    @pytest.mark.unit
    def test_history(self, event_bus: InMemoryEventBus) -> None:
        """测试事件历史"""
        first, second = created("a1"), created("a2")
        event_bus.publish(first)
        event_bus.publish(second)

        history = event_bus.published
        assert history == [first, second]
        history.clear()
        assert len(event_bus.published) == 2

        event_bus.clear()
        assert event_bus.published == []

    @pytest.mark.unit
    def test_history_disabled(self) -> None:
        """测试关闭事件历史"""
        bus = InMemoryEventBus(keep_history=False)
        callback = Mock()
        bus.subscribe("author.created", callback)

        bus.publish(created())
        callback.assert_called_once()
        assert bus.published == []
