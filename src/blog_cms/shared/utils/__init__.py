"""共享工具"""

from datetime import datetime, timezone

from .logger import logger, setup_logger
from .text import clean_whitespace, count_words, fallback_slug, slugify, truncate_text


def utc_now() -> datetime:
    """返回当前 UTC 时间（带时区信息），替代 datetime.now() 的无时区调用"""
    return datetime.now(timezone.utc)


def to_iso(value: datetime | None) -> str | None:
    """datetime 转 ISO-8601 字符串，None 原样返回"""
    return value.isoformat() if value is not None else None


def from_iso(value: str | None) -> datetime | None:
    """ISO-8601 字符串转 datetime；无时区信息的按 UTC 处理"""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = [
    # Logger
    "logger",
    "setup_logger",
    # Text
    "truncate_text",
    "clean_whitespace",
    "count_words",
    "slugify",
    "fallback_slug",
    # Datetime
    "utc_now",
    "to_iso",
    "from_iso",
]
