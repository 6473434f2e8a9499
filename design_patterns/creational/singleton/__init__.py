"""Singleton pattern examples."""

from .singleton import (
    AppConfig,
    AppLogger,
    ConfigManager,
    DatabaseConnection,
    LogEntry,
    LogLevel,
    Singleton,
    SingletonBase,
)

__all__ = [
    "AppConfig",
    "AppLogger",
    "ConfigManager",
    "DatabaseConnection",
    "LogEntry",
    "LogLevel",
    "Singleton",
    "SingletonBase",
]
