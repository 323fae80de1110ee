"""翻译出站端口"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TranslatorPort(Protocol):
    """错误消息翻译端口"""

    def translate(self, key: str, params: dict[str, Any] | None = None, default: str | None = None) -> str:
        """
        翻译消息

        Args:
            key: 翻译键，例如 error.article_not_found
            params: 模板参数
            default: 目录中没有该键时返回的文本

        Returns:
            翻译后的文本；没有译文且没有 default 时返回 key
        """
        ...
