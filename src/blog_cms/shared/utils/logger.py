"""日志配置 - 基于Loguru

支持：
- 结构化 JSON 日志
- request_id 追踪
- 领域事件与网关调用的结构化记录
- 日志文件轮转
"""

import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from ..constants import DEFAULT_DATA_DIR, LOG_FIELD_MAX_LENGTH, LOG_FILE_NAME
from .text import truncate_text

# 请求 ID 上下文变量
_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def setup_logger(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path | None = None,
    json_format: bool = False,
    rotation: str = "10 MB",
    retention: str = "30 days",
    compression: str = "zip",
) -> None:
    """
    配置日志

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_to_file: 是否写入文件
        log_dir: 日志目录，默认 ~/.blog_cms/logs
        json_format: 是否使用JSON格式（便于日志收集系统）
        rotation: 日志文件轮转策略 (例如 "10 MB", "1 day")
        retention: 日志保留时间 (例如 "30 days", "5 files")
        compression: 压缩格式 ("zip", "gz", "bz2")
    """
    # 移除默认处理器
    logger.remove()

    if json_format:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_to_file:
        if log_dir is None:
            log_dir = Path.home() / DEFAULT_DATA_DIR / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / LOG_FILE_NAME,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
            enqueue=True,
        )


# -------------------- Request ID 追踪 --------------------

def generate_request_id() -> str:
    """生成新的请求 ID"""
    return str(uuid.uuid4())[:8]


def set_request_id(request_id: str | None = None) -> str:
    """设置当前请求的 request_id"""
    if request_id is None:
        request_id = generate_request_id()
    _request_id_var.set(request_id)
    return request_id


def get_request_id() -> str | None:
    """获取当前请求的 request_id"""
    return _request_id_var.get()


def clear_request_id() -> None:
    """清除当前请求的 request_id"""
    _request_id_var.set(None)


# -------------------- 结构化日志记录 --------------------

def shorten_fields(fields: dict[str, Any], max_length: int = LOG_FIELD_MAX_LENGTH) -> dict[str, Any]:
    """截断过长的字符串字段（正文等），避免日志膨胀"""
    return {
        key: truncate_text(value, max_length) if isinstance(value, str) else value
        for key, value in fields.items()
    }


def log_event(
    event: str,
    level: str = "INFO",
    **kwargs: Any,
) -> None:
    """
    记录结构化事件

    Args:
        event: 事件名称
        level: 日志级别
        **kwargs: 额外的事件属性

    Examples:
        log_event("article.submit_for_review", id="...", status="pending_review")
    """
    request_id = get_request_id()
    if request_id:
        kwargs["request_id"] = request_id

    # loguru 会用 kwargs 格式化消息，花括号需转义
    message = f"[{event}] " + " ".join(f"{k}={v}" for k, v in kwargs.items())
    message = message.replace("{", "{{").replace("}", "}}")

    log_func = getattr(logger, level.lower(), logger.info)
    log_func(message, **{"event": event, **kwargs})


def log_domain_event(event: Any) -> None:
    """记录已发布的领域事件（需提供 name 与 to_dict()）"""
    payload = shorten_fields(event.to_dict())
    payload.pop("name", None)
    log_event(f"domain_event.{event.name}", level="INFO", **payload)


__all__ = [
    "logger",
    "setup_logger",
    "generate_request_id",
    "set_request_id",
    "get_request_id",
    "clear_request_id",
    "shorten_fields",
    "log_event",
    "log_domain_event",
]
