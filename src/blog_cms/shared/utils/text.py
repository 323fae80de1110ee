"""文本处理工具"""

import hashlib
import re

from slugify import slugify as _transliterate

from ..constants import SLUG_BASE_MAX_LENGTH, SLUG_FALLBACK_PREFIX


def truncate_text(text: str, max_length: int = 500, suffix: str = "...") -> str:
    """截断文本到指定长度"""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def clean_whitespace(text: str) -> str:
    """合并连续空白为单个空格"""
    return re.sub(r"\s+", " ", text).strip()


def count_words(text: str) -> int:
    """统计字数

    中文按字符计数，英文按单词计数。
    """
    chinese = len(re.findall(r"[一-鿿]", text))
    english = len(re.findall(r"[A-Za-z0-9]+(?:['-][A-Za-z0-9]+)*", text))
    return chinese + english


def slugify(text: str, max_length: int = SLUG_BASE_MAX_LENGTH) -> str:
    """
    生成 URL 安全的 slug

    使用 python-slugify 音译非 ASCII 字符（中文转为拼音），再将非字母数字
    序列替换为单个连字符。结果最长 max_length 个字符，且不以连字符结尾；
    全是符号的文本返回空字符串。

    Examples:
        >>> slugify("My Title")
        'my-title'
        >>> slugify("  Café & Crème!  ")
        'cafe-creme'
    """
    return _transliterate(text, max_length=max_length)


def fallback_slug(text: str) -> str:
    """
    无法音译出任何字母数字时使用的 slug

    由文本的 sha1 摘要前 8 位生成，同一文本总是得到同一结果。
    """
    digest = hashlib.sha1(text.encode("utf-8"), usedforsecurity=False).hexdigest()[:8]
    return f"{SLUG_FALLBACK_PREFIX}-{digest}"


__all__ = ["truncate_text", "clean_whitespace", "count_words", "slugify", "fallback_slug"]
