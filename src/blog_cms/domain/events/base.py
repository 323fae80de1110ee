"""领域事件基础设施

生命周期操作是纯函数：返回 Outcome（新快照 + 按产生顺序排列的事件），
由处理器显式持久化新快照并释放事件。
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

from ...shared.utils import to_iso

T = TypeVar("T")


@dataclass(frozen=True)
class DomainEvent:
    """
    领域事件基类

    子类用 name 声明事件名，用 occurred_field 指明哪个时间字段
    表示事件发生时间（例如 created_at、published_at）。
    """

    name: ClassVar[str] = "domain_event"
    occurred_field: ClassVar[str] = ""

    @property
    def occurred_at(self) -> datetime:
        return getattr(self, self.occurred_field)

    def to_dict(self) -> dict[str, Any]:
        """转换为可序列化的字典（时间为 ISO-8601 字符串）"""
        data: dict[str, Any] = {"name": self.name}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, datetime):
                value = to_iso(value)
            elif isinstance(value, tuple):
                value = list(value)
            data[item.name] = value
        return data


@dataclass(eq=False)
class Outcome(Generic[T]):
    """
    一次领域操作的结果

    Attributes:
        state: 操作后的聚合快照
    """

    state: T
    _events: list[DomainEvent] = field(default_factory=list)

    @property
    def events(self) -> tuple[DomainEvent, ...]:
        """查看尚未释放的事件（不清空）"""
        return tuple(self._events)

    def release_events(self) -> list[DomainEvent]:
        """释放事件：第一次返回全部事件，之后返回空列表"""
        released = list(self._events)
        self._events.clear()
        return released
