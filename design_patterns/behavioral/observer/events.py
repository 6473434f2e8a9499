"""Event emitter, logger and filter built on the synchronous notifier."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, FrozenSet, Iterable, List, Optional

import click
import structlog

from .notifier import SyncNotifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Event:
    """Represents an emitted event.

    Attributes:
        type: Type tag used for filtering, e.g. "error" or "info"
        data: Arbitrary event payload
        timestamp: When the event was emitted
        source: Optional name of the emitting component
    """

    type: str
    data: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: Optional[str] = None


class EventEmitter(SyncNotifier[Event]):
    """Notifier that builds timestamped events from a type, payload and source."""

    def emit(self, type: str, data: Any, source: Optional[str] = None) -> Event:
        event = Event(type=type, data=data, source=source)
        self.notify(event)
        return event


class EventLogger:
    """Observer that keeps every event it receives."""

    def __init__(self, logger_id: str):
        self._id = logger_id
        self._logs: List[Event] = []

    def update(self, event: Event) -> None:
        self._logs.append(event)
        click.echo(
            f"[{self._id}] Event logged: {event.type} from {event.source or 'unknown'} "
            f"at {event.timestamp.isoformat()}"
        )

    def get_logs(self) -> List[Event]:
        return list(self._logs)

    def get_logs_count(self) -> int:
        return len(self._logs)

    def get_id(self) -> str:
        return self._id


class EventFilter:
    """Observer that re-publishes events of selected types to its own emitter.

    The allow-set is fixed at construction. Matching events are copied with
    their source re-tagged as ``filtered-<source>`` and emitted downstream;
    anything else is dropped without a trace.
    """

    def __init__(self, filter_id: str, allowed_types: Iterable[str]):
        """Initialize the filter.

        Args:
            filter_id: Identifier reported by ``get_id``
            allowed_types: Event type tags to forward
        """
        self._id = filter_id
        self._allowed_types: FrozenSet[str] = frozenset(allowed_types)
        self._filtered_emitter = EventEmitter()

    @property
    def allowed_types(self) -> FrozenSet[str]:
        return self._allowed_types

    def update(self, event: Event) -> None:
        if event.type not in self._allowed_types:
            return

        logger.debug("event_filtered", filter_id=self._id, event_type=event.type)
        derived = replace(
            event,
            timestamp=datetime.now(timezone.utc),
            source=f"filtered-{event.source or 'unknown'}",
        )
        self._filtered_emitter.notify(derived)

    def get_filtered_emitter(self) -> EventEmitter:
        """Return the downstream emitter so callers can subscribe to the filtered stream."""
        return self._filtered_emitter

    def get_id(self) -> str:
        return self._id
