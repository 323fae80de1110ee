"""配置管理 - 基于Pydantic Settings

环境变量使用 BLOG_CMS_ 前缀，嵌套配置以双下划线分隔，例如：

    BLOG_CMS_LOG_LEVEL=DEBUG
    BLOG_CMS_STORAGE__DATA_FILE=/tmp/blog.json
    BLOG_CMS_EDITORIAL__SEO_CHECKS=true
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...shared.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_DATA_FILE,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_TREE_MAX_DEPTH,
    ENV_PREFIX,
    MAX_PAGE_LIMIT,
    SEO_MIN_CONTENT_LENGTH,
    SEO_MIN_TITLE_LENGTH,
    SUPPORTED_LOCALES,
)
from ...shared.exceptions import ConfigError, ErrorCode


class StorageSettings(BaseSettings):
    """存储配置"""

    data_file: str | None = Field(
        default=None,
        description="JSON 数据文件路径（为空时使用 ~/.blog_cms/blog.json）",
    )
    in_memory: bool = Field(default=False, description="只保存在内存中，不写入文件")

    def resolve_data_file(self) -> Path | None:
        """实际使用的数据文件；内存模式返回 None"""
        if self.in_memory:
            return None
        if self.data_file:
            return Path(self.data_file).expanduser()
        return Path.home() / DEFAULT_DATA_DIR / DEFAULT_DATA_FILE


class EditorialSettings(BaseSettings):
    """编辑流程配置"""

    seo_checks: bool = Field(default=False, description="发布前是否执行 SEO 检查")
    seo_min_title_length: int = Field(default=SEO_MIN_TITLE_LENGTH, ge=1)
    seo_min_content_length: int = Field(default=SEO_MIN_CONTENT_LENGTH, ge=1)
    category_tree_max_depth: int = Field(
        default=DEFAULT_TREE_MAX_DEPTH,
        ge=1,
        description="分类树默认最大深度",
    )
    auto_suffix_slugs: bool = Field(
        default=False,
        description="创建文章时 slug 冲突是否自动追加序号（否则报告冲突）",
    )


class ListingSettings(BaseSettings):
    """列表配置"""

    default_page_limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)


class AppSettings(BaseSettings):
    """主应用配置"""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 基本设置
    debug: bool = Field(default=False, description="调试模式")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="日志级别",
    )
    log_json: bool = Field(default=False, description="以 JSON 格式输出日志")
    log_to_file: bool = Field(default=False, description="同时写入日志文件")
    locale: str = Field(default="zh_CN", description="错误消息语言 (zh_CN, en)")
    translations_file: str | None = Field(
        default=None,
        description="额外的 JSON 翻译目录，覆盖内置译文",
    )

    # 子配置
    storage: StorageSettings = Field(default_factory=StorageSettings)
    editorial: EditorialSettings = Field(default_factory=EditorialSettings)
    listing: ListingSettings = Field(default_factory=ListingSettings)

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"不支持的语言: {value}（可选: {', '.join(SUPPORTED_LOCALES)}）")
        return value


@lru_cache
def get_settings() -> AppSettings:
    """获取应用配置（单例）

    Raises:
        ConfigError: 环境变量或 .env 中的配置值无效
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigError(f"配置无效: {e}", error_code=ErrorCode.CONFIG_INVALID, cause=e) from e
