"""slug 生成出站端口"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SlugGeneratorPort(Protocol):
    """slug 生成端口"""

    def slugify(self, text: str) -> str:
        """
        将文本转换为 URL 安全的 slug（不检查唯一性）

        Args:
            text: 标题或名称

        Returns:
            slug；中文等非 ASCII 字符音译为拉丁字母，音译后为空时
            返回由文本摘要生成的 slug
        """
        ...

    def generate_from_title(self, title: str) -> str:
        """为文章标题生成未被占用的 slug（冲突时追加 -1、-2 ...）"""
        ...

    def generate_from_name(self, name: str) -> str:
        """为分类名称生成未被占用的 slug"""
        ...
