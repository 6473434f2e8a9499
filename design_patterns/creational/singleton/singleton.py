"""Singleton pattern: one shared instance per class, reachable from anywhere."""

import asyncio
import threading
import time
from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar

import click
import structlog

from ...errors import ConfigurationError, NotConnectedError, SingletonError

logger = structlog.get_logger(__name__)

S = TypeVar("S", bound="SingletonBase")


class Singleton:
    """Basic lazily-created singleton holding a list of strings."""

    _instance: ClassVar[Optional["Singleton"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._data: List[str] = []
        self._timestamp = time.time()

    @classmethod
    def get_instance(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def add_data(self, item: str) -> None:
        self._data.append(item)

    def get_data(self) -> List[str]:
        return list(self._data)

    def get_timestamp(self) -> float:
        return self._timestamp

    def clear_data(self) -> None:
        self._data = []


class SingletonBase:
    """Generic singleton base; each subclass gets its own instance.

    ``instance()`` creates or returns the shared object. Constructing a subclass
    directly while an instance already exists raises ``SingletonError``.
    """

    _instances: ClassVar[Dict[type, "SingletonBase"]] = {}
    _instances_lock: ClassVar[threading.RLock] = threading.RLock()

    def __init__(self) -> None:
        cls = type(self)
        with SingletonBase._instances_lock:
            if cls in SingletonBase._instances:
                raise SingletonError(f"Instance of {cls.__name__} already exists")
            SingletonBase._instances[cls] = self

    @classmethod
    def instance(cls: Type[S]) -> S:
        with SingletonBase._instances_lock:
            if cls not in SingletonBase._instances:
                cls()
            return SingletonBase._instances[cls]

    @classmethod
    def reset_instance(cls) -> None:
        with SingletonBase._instances_lock:
            SingletonBase._instances.pop(cls, None)


@dataclass
class AppConfig:
    api_url: str = "https://api.example.com"
    timeout: int = 5000
    retries: int = 3
    debug: bool = False


class ConfigManager(SingletonBase):
    """Process-wide application settings."""

    def __init__(self) -> None:
        super().__init__()
        self._config = AppConfig()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        return cls.instance()

    def _check_key(self, key: str) -> None:
        if key not in {f.name for f in fields(AppConfig)}:
            raise ConfigurationError(f"Unknown configuration key: {key}")

    def get(self, key: str) -> Any:
        self._check_key(key)
        return getattr(self._config, key)

    def set(self, key: str, value: Any) -> None:
        self._check_key(key)
        setattr(self._config, key, value)

    def get_all(self) -> Dict[str, Any]:
        return asdict(self._config)

    def update(self, **changes: Any) -> None:
        for key in changes:
            self._check_key(key)
        self._config = replace(self._config, **changes)


class DatabaseConnection:
    """Simulated database connection shared by the whole process."""

    _instance: ClassVar[Optional["DatabaseConnection"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, connection_string: str = "mongodb://localhost:27017/myapp") -> None:
        self._connection_string = connection_string
        self._connected = False
        self._queries: List[str] = []

    @classmethod
    async def get_instance(cls) -> "DatabaseConnection":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    async def connect(self, delay: float = 0.1) -> bool:
        if not self._connected:
            click.echo(f"Connecting to {self._connection_string}")
            await asyncio.sleep(delay)
            self._connected = True
            logger.info("database_connected", connection_string=self._connection_string)
        return self._connected

    def disconnect(self) -> None:
        if self._connected:
            click.echo("Disconnecting from database")
            self._connected = False

    def query(self, sql: str) -> str:
        if not self._connected:
            raise NotConnectedError("Database not connected")
        self._queries.append(sql)
        return f"Executed: {sql}"

    def get_query_history(self) -> List[str]:
        return list(self._queries)

    def is_connection_active(self) -> bool:
        return self._connected


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    message: str
    timestamp: datetime
    category: Optional[str] = None

    def format(self) -> str:
        category = f"[{self.category}]" if self.category else ""
        return f"{self.timestamp.isoformat()} [{self.level.name}]{category} {self.message}"


class AppLogger(SingletonBase):
    """Application-wide log book with a level threshold.

    Entries at or above the threshold are kept in memory and forwarded to
    structlog; anything below it is discarded.
    """

    def __init__(self) -> None:
        super().__init__()
        self._logs: List[LogEntry] = []
        self._log_level = LogLevel.INFO

    @classmethod
    def get_instance(cls) -> "AppLogger":
        return cls.instance()

    def set_log_level(self, level: LogLevel) -> None:
        self._log_level = level

    def log(self, level: LogLevel, message: str, category: Optional[str] = None) -> None:
        if level < self._log_level:
            return

        entry = LogEntry(
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc),
            category=category,
        )
        self._logs.append(entry)
        click.echo(entry.format())
        logger.debug("app_log_entry", level=level.name, category=category, message=message)

    def debug(self, message: str, category: Optional[str] = None) -> None:
        self.log(LogLevel.DEBUG, message, category)

    def info(self, message: str, category: Optional[str] = None) -> None:
        self.log(LogLevel.INFO, message, category)

    def warn(self, message: str, category: Optional[str] = None) -> None:
        self.log(LogLevel.WARN, message, category)

    def error(self, message: str, category: Optional[str] = None) -> None:
        self.log(LogLevel.ERROR, message, category)

    def get_logs(self, level: Optional[LogLevel] = None) -> List[LogEntry]:
        if level is not None:
            return [entry for entry in self._logs if entry.level == level]
        return list(self._logs)

    def clear_logs(self) -> None:
        self._logs = []
