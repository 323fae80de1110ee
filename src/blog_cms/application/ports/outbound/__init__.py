"""出站端口 - 定义应用层依赖的外部服务接口"""

from .clock import Clock
from .event_bus_port import EventBusPort
from .id_generator_port import IdGeneratorPort
from .slug_generator_port import SlugGeneratorPort
from .translator_port import TranslatorPort

__all__ = [
    "Clock",
    "EventBusPort",
    "IdGeneratorPort",
    "SlugGeneratorPort",
    "TranslatorPort",
]
