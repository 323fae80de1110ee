"""命令处理器基类"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from loguru import logger

from ...shared.utils import utc_now

if TYPE_CHECKING:
    from ...domain.events import Outcome
    from ..ports.outbound import Clock, EventBusPort


class CommandHandler:
    """
    命令处理器基类

    子类按固定步骤编排：构造值对象 → 加载快照（不存在立即失败）→
    调用一个领域操作 → 持久化 → 按顺序发布事件。
    领域异常一律向上传播，由网关的错误处理中间件转换。
    """

    def __init__(self, event_bus: EventBusPort, clock: Clock | None = None):
        self._event_bus = event_bus
        self._clock = clock or utc_now

    def _now(self) -> datetime:
        return self._clock()

    def _dispatch(self, outcome: Outcome) -> None:
        """释放并发布事件（每个事件只发布一次，保持产生顺序）"""
        events = outcome.release_events()
        for event in events:
            self._event_bus.publish(event)
        if events:
            logger.debug(f"{self.__class__.__name__} 发布了 {len(events)} 个事件")
