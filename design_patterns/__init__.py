"""Gang of Four design patterns with runnable demos."""

from .behavioral.observer import AsyncNotifier, EventFilter, ObserverFailure, SyncNotifier
from .catalog import PATTERNS, PatternEntry, find_pattern
from .errors import DesignPatternsError

__version__ = "1.0.0"

__all__ = [
    "AsyncNotifier",
    "DesignPatternsError",
    "EventFilter",
    "ObserverFailure",
    "PATTERNS",
    "PatternEntry",
    "SyncNotifier",
    "find_pattern",
]
