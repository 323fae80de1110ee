"""错误消息翻译适配器

内置目录位于 translations/<locale>.json，键为 error.<错误码名称小写>，
值为 str.format 模板，参数来自异常的 details。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from ...shared.constants import SUPPORTED_LOCALES
from ...shared.exceptions import ConfigError

CATALOG_DIR = Path(__file__).parent / "translations"
MAX_CATALOG_FILE_SIZE = 1024 * 1024  # 1MB


def _load_catalog(path: Path) -> dict[str, str]:
    if path.stat().st_size > MAX_CATALOG_FILE_SIZE:
        raise ConfigError(f"翻译目录过大: {path}")
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ConfigError(f"翻译目录必须是 JSON 对象: {path}")
    return {key: value for key, value in raw.items() if isinstance(value, str)}


def _format_param(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return "; ".join(str(item) for item in value)
    return value


class CatalogTranslator:
    """
    基于 JSON 目录的翻译器

    Args:
        locale: 语言代码 (zh_CN, en)
        extra_catalog: 额外的 JSON 目录文件，其中的键覆盖内置译文
    """

    def __init__(self, locale: str = "zh_CN", extra_catalog: str | Path | None = None):
        if locale not in SUPPORTED_LOCALES:
            raise ConfigError(f"不支持的语言: {locale}")
        self.locale = locale

        try:
            self._catalog = _load_catalog(CATALOG_DIR / f"{locale}.json")
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"加载内置翻译失败: {locale}", cause=e) from e

        if extra_catalog:
            path = Path(extra_catalog).expanduser()
            try:
                self._catalog.update(_load_catalog(path))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"加载翻译文件失败 {path}: {e}")

        logger.debug(f"已加载翻译: {locale} ({len(self._catalog)} 条)")

    def translate(self, key: str, params: dict[str, Any] | None = None, default: str | None = None) -> str:
        template = self._catalog.get(key)
        if template is None:
            return default if default is not None else key

        values = {name: _format_param(value) for name, value in (params or {}).items()}
        try:
            return template.format_map(values)
        except (KeyError, IndexError, ValueError):
            # 模板需要的参数缺失
            logger.debug(f"翻译参数不完整: {key}")
            return default if default is not None else template

    def __contains__(self, key: str) -> bool:
        return key in self._catalog
