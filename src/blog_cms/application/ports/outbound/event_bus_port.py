"""事件总线出站端口"""

from typing import Protocol, runtime_checkable

from ....domain.events import DomainEvent


@runtime_checkable
class EventBusPort(Protocol):
    """
    事件总线端口

    调用是同步的，背后可以是进程内分发，也可以是异步传输。
    """

    def publish(self, event: DomainEvent) -> None:
        """发布一个领域事件"""
        ...
