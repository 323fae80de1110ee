"""进程内事件总线"""

from __future__ import annotations

import threading
from collections import defaultdict
from collections.abc import Callable

from loguru import logger

from ...domain.events import DomainEvent
from ...shared.utils.logger import log_domain_event

Subscriber = Callable[[DomainEvent], None]


class InMemoryEventBus:
    """
    同步的进程内事件总线

    按事件名称（或 "*" 表示全部事件）订阅。订阅者按注册顺序被调用，
    单个订阅者抛出的异常只记录日志，不影响其他订阅者和发布方。
    """

    WILDCARD = "*"

    def __init__(self, keep_history: bool = True):
        self._subscribers: dict[str, list[Subscriber]] = defaultdict(list)
        self._history: list[DomainEvent] = []
        self._keep_history = keep_history
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, callback: Subscriber) -> Callable[[], None]:
        """订阅事件，返回取消订阅函数"""
        with self._lock:
            self._subscribers[event_name].append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers[event_name]:
                    self._subscribers[event_name].remove(callback)

        return unsubscribe

    def publish(self, event: DomainEvent) -> None:
        log_domain_event(event)
        with self._lock:
            if self._keep_history:
                self._history.append(event)
            callbacks = [*self._subscribers[event.name], *self._subscribers[self.WILDCARD]]

        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                logger.exception(f"事件订阅者处理 {event.name} 失败: {e}")

    @property
    def published(self) -> list[DomainEvent]:
        """已发布事件（按发布顺序）"""
        with self._lock:
            return list(self._history)

    def clear(self) -> None:
        with self._lock:
            self._history.clear()
