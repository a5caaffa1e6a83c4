"""
Инфраструктурный слой: хранилища, логгер и настройки.
"""

from .config import FrontDeskSettings, load_settings
from .logging import ConsoleLogger
from .storage import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    "FrontDeskSettings",
    "load_settings",
    "ConsoleLogger",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
