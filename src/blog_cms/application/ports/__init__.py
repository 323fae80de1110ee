"""
应用层端口

仓储协议位于领域层 (domain.repositories)；
这里是应用层依赖的其他外部能力。
"""

from .outbound import Clock, EventBusPort, IdGeneratorPort, SlugGeneratorPort, TranslatorPort

__all__ = [
    "Clock",
    "EventBusPort",
    "IdGeneratorPort",
    "SlugGeneratorPort",
    "TranslatorPort",
]
