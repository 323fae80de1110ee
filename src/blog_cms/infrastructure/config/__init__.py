"""配置模块"""

from .container import Container, get_container, reset_container
from .settings import AppSettings, EditorialSettings, ListingSettings, StorageSettings, get_settings

__all__ = [
    "AppSettings",
    "StorageSettings",
    "EditorialSettings",
    "ListingSettings",
    "get_settings",
    "Container",
    "get_container",
    "reset_container",
]
