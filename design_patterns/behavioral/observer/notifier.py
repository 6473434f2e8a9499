"""Observer notification engines.

Two independent notifiers share the same registration rules:

- ``SyncNotifier`` calls ``update(data)`` on every observer in turn.
- ``AsyncNotifier`` awaits ``update_async(data)`` either concurrently
  (``notify_parallel``) or one at a time (``notify_sequential``).

Observers are deduplicated by identity and visited in insertion order. Every
notify call iterates a snapshot of the registration set taken when the call
starts, so observers added or removed from inside a callback only affect later
notifications. A failing observer is logged and reported back in the returned
list of ``ObserverFailure`` records; it never stops delivery to the others and
never raises out of the notify call.
"""

import asyncio
import threading
from dataclasses import dataclass
from typing import Awaitable, Dict, Generic, List, Optional, Protocol, TypeVar

import structlog

from ...metrics.prometheus import metrics

logger = structlog.get_logger(__name__)

T = TypeVar("T")
O = TypeVar("O")


class Observer(Protocol[T]):
    """Anything with an id and a synchronous ``update``."""

    def get_id(self) -> str: ...

    def update(self, data: T) -> None: ...


class AsyncObserver(Protocol[T]):
    """Anything with an id and a coroutine ``update_async``."""

    def get_id(self) -> str: ...

    def update_async(self, data: T) -> Awaitable[None]: ...


@dataclass(frozen=True)
class ObserverFailure:
    """A single observer invocation that raised.

    Attributes:
        observer_id: Value of the failing observer's ``get_id()``
        error: The exception the observer raised
    """

    observer_id: str
    error: Exception


def _observer_id(observer: object) -> str:
    try:
        return str(observer.get_id())
    except Exception:
        return repr(observer)


def _record(mode: str, status: str) -> None:
    metrics.get_metric("observer_notifications").labels(mode=mode, status=status).inc()


class _ObserverRegistry(Generic[O]):
    """Identity-keyed, insertion-ordered registration set."""

    def __init__(self) -> None:
        self._observers: Dict[int, O] = {}
        self._lock = threading.Lock()

    def add(self, observer: O) -> None:
        """Register an observer. Adding the same object twice is a no-op."""
        with self._lock:
            self._observers.setdefault(id(observer), observer)

    def remove(self, observer: O) -> None:
        """Unregister an observer if present."""
        with self._lock:
            self._observers.pop(id(observer), None)

    def has(self, observer: O) -> bool:
        with self._lock:
            return id(observer) in self._observers

    def count(self) -> int:
        with self._lock:
            return len(self._observers)

    def clear(self) -> None:
        with self._lock:
            self._observers.clear()

    def _snapshot(self) -> List[O]:
        with self._lock:
            return list(self._observers.values())

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        # An empty notifier is still a usable notifier.
        return True

    def __contains__(self, observer: object) -> bool:
        return self.has(observer)


class SyncNotifier(_ObserverRegistry[Observer[T]], Generic[T]):
    """Synchronous one-to-many delivery of a value to registered observers."""

    def notify(self, data: T) -> List[ObserverFailure]:
        """Call ``update(data)`` on each registered observer.

        Args:
            data: Payload forwarded unchanged to every observer

        Returns:
            Failures raised by individual observers, in delivery order
        """
        failures = []
        for observer in self._snapshot():
            try:
                observer.update(data)
            except Exception as e:
                failures.append(_handle_failure(observer, e, mode="sync"))
            else:
                _record("sync", "success")
        return failures


class AsyncNotifier(_ObserverRegistry[AsyncObserver[T]], Generic[T]):
    """Asynchronous delivery with concurrent and ordered modes."""

    async def _deliver(
        self, observer: AsyncObserver[T], data: T, mode: str
    ) -> Optional[ObserverFailure]:
        try:
            await observer.update_async(data)
        except Exception as e:
            return _handle_failure(observer, e, mode=mode)
        _record(mode, "success")
        return None

    async def notify_parallel(self, data: T) -> List[ObserverFailure]:
        """Start ``update_async(data)`` on every observer, then wait for all of them.

        Observers start in registration order; completion order is whatever
        the individual observers' suspension points produce. Total time is
        bounded by the slowest observer.

        Args:
            data: Payload forwarded unchanged to every observer

        Returns:
            Failures raised by individual observers, in registration order
        """
        tasks = [
            asyncio.ensure_future(self._deliver(observer, data, "parallel"))
            for observer in self._snapshot()
        ]
        if not tasks:
            return []
        results = await asyncio.gather(*tasks)
        return [failure for failure in results if failure is not None]

    async def notify_sequential(self, data: T) -> List[ObserverFailure]:
        """Await ``update_async(data)`` on each observer, one after another.

        Args:
            data: Payload forwarded unchanged to every observer

        Returns:
            Failures raised by individual observers, in delivery order
        """
        failures = []
        for observer in self._snapshot():
            failure = await self._deliver(observer, data, "sequential")
            if failure is not None:
                failures.append(failure)
        return failures


def _handle_failure(observer: object, error: Exception, mode: str) -> ObserverFailure:
    observer_id = _observer_id(observer)
    logger.error(
        "observer_notification_failed",
        observer_id=observer_id,
        error=str(error),
        error_type=type(error).__name__,
        mode=mode,
    )
    _record(mode, "error")
    return ObserverFailure(observer_id=observer_id, error=error)
