import pytest
import structlog

from design_patterns.creational.singleton import (
    AppLogger,
    ConfigManager,
    DatabaseConnection,
    Singleton,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep runner settings from the outer environment out of the tests."""
    for name in ("DESIGN_PATTERNS_PAUSE", "DESIGN_PATTERNS_LOG_LEVEL", "DESIGN_PATTERNS_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test fresh singleton instances."""
    yield
    Singleton.reset_instance()
    DatabaseConnection.reset_instance()
    ConfigManager.reset_instance()
    AppLogger.reset_instance()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration made by CLI invocations."""
    yield
    structlog.reset_defaults()


class RecordingObserver:
    """Observer that remembers every payload it receives."""

    def __init__(self, observer_id, log=None):
        self._id = observer_id
        self.received = []
        self._log = log

    def update(self, data):
        self.received.append(data)
        if self._log is not None:
            self._log.append(self._id)

    def get_id(self):
        return self._id


class FailingObserver:
    """Observer whose update always raises."""

    def __init__(self, observer_id, error=None):
        self._id = observer_id
        self.error = error or RuntimeError(f"{observer_id} failed")
        self.calls = 0

    def update(self, data):
        self.calls += 1
        raise self.error

    async def update_async(self, data):
        self.calls += 1
        raise self.error

    def get_id(self):
        return self._id


@pytest.fixture
def recording_observer():
    """Factory for observers that record what they receive."""
    return RecordingObserver


@pytest.fixture
def failing_observer():
    """Factory for observers that always raise."""
    return FailingObserver
