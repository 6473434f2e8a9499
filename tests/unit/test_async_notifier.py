import asyncio
import time

import pytest

from design_patterns.behavioral.observer import AsyncNotifier, AsyncProcessor


class TimedObserver:
    def __init__(self, observer_id, delay, events):
        self._id = observer_id
        self.delay = delay
        self.events = events
        self.received = []

    async def update_async(self, data):
        self.events.append(("start", self._id))
        await asyncio.sleep(self.delay)
        self.received.append(data)
        self.events.append(("end", self._id))

    def get_id(self):
        return self._id


@pytest.fixture
def notifier():
    return AsyncNotifier()


@pytest.fixture
def events():
    return []


@pytest.fixture
def timed_observers(notifier, events):
    observers = [
        TimedObserver("A", 0.2, events),
        TimedObserver("B", 0.3, events),
        TimedObserver("C", 0.1, events),
    ]
    for observer in observers:
        notifier.add(observer)
    return observers


class TestParallel:
    @pytest.mark.asyncio
    async def test_wall_time_is_bounded_by_slowest(self, notifier, timed_observers):
        start = time.perf_counter()
        failures = await notifier.notify_parallel("data")
        elapsed = time.perf_counter() - start

        assert failures == []
        assert 0.28 <= elapsed < 0.5
        for observer in timed_observers:
            assert observer.received == ["data"]

    @pytest.mark.asyncio
    async def test_all_observers_start_before_any_finishes(
        self, notifier, timed_observers, events
    ):
        await notifier.notify_parallel("data")

        assert events[:3] == [("start", "A"), ("start", "B"), ("start", "C")]
        assert [e for e in events if e[0] == "end"] == [("end", "C"), ("end", "A"), ("end", "B")]

    @pytest.mark.asyncio
    async def test_failure_is_isolated(self, notifier, timed_observers, failing_observer):
        broken = failing_observer("broken")
        notifier.add(broken)

        failures = await notifier.notify_parallel("data")

        assert [f.observer_id for f in failures] == ["broken"]
        assert failures[0].error is broken.error
        for observer in timed_observers:
            assert observer.received == ["data"]

    @pytest.mark.asyncio
    async def test_failure_registered_first_does_not_block_others(
        self, notifier, failing_observer, events
    ):
        broken = failing_observer("broken")
        notifier.add(broken)
        healthy = [TimedObserver(name, 0.05, events) for name in ("A", "B")]
        for observer in healthy:
            notifier.add(observer)

        failures = await notifier.notify_parallel("data")

        assert [f.observer_id for f in failures] == ["broken"]
        assert broken.calls == 1
        for observer in healthy:
            assert observer.received == ["data"]

    @pytest.mark.asyncio
    async def test_no_observers(self, notifier):
        assert await notifier.notify_parallel("data") == []

    @pytest.mark.asyncio
    async def test_failure_logged_with_mode(self, notifier, failing_observer, mocker):
        mock_logger = mocker.patch("design_patterns.behavioral.observer.notifier.logger")
        notifier.add(failing_observer("broken"))

        await notifier.notify_parallel({})

        mock_logger.error.assert_called_once()
        _, kwargs = mock_logger.error.call_args
        assert kwargs["observer_id"] == "broken"
        assert kwargs["mode"] == "parallel"


class TestSequential:
    @pytest.mark.asyncio
    async def test_wall_time_is_sum_of_delays(self, notifier, timed_observers):
        start = time.perf_counter()
        failures = await notifier.notify_sequential("data")
        elapsed = time.perf_counter() - start

        assert failures == []
        assert elapsed >= 0.55
        for observer in timed_observers:
            assert observer.received == ["data"]

    @pytest.mark.asyncio
    async def test_each_observer_finishes_before_next_starts(
        self, notifier, timed_observers, events
    ):
        await notifier.notify_sequential("data")

        assert events == [
            ("start", "A"),
            ("end", "A"),
            ("start", "B"),
            ("end", "B"),
            ("start", "C"),
            ("end", "C"),
        ]

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_later_observers(
        self, notifier, failing_observer, events
    ):
        broken = failing_observer("broken")
        after = TimedObserver("after", 0, events)
        notifier.add(broken)
        notifier.add(after)

        failures = await notifier.notify_sequential("data")

        assert broken.calls == 1
        assert after.received == ["data"]
        assert [f.observer_id for f in failures] == ["broken"]


class TestRegistration:
    @pytest.mark.asyncio
    async def test_duplicate_add_delivers_once(self, notifier):
        processor = AsyncProcessor("P", processing_time=0)
        notifier.add(processor)
        notifier.add(processor)

        await notifier.notify_parallel({})

        assert notifier.count() == 1
        assert processor.processed == 1

    @pytest.mark.asyncio
    async def test_clear_stops_delivery(self, notifier):
        processor = AsyncProcessor("P", processing_time=0)
        notifier.add(processor)
        notifier.clear()

        await notifier.notify_sequential({})

        assert not notifier.has(processor)
        assert processor.processed == 0

    @pytest.mark.asyncio
    async def test_observer_added_during_parallel_notify_is_not_called(self, notifier, events):
        late = TimedObserver("late", 0, events)

        class Subscriber:
            async def update_async(self, data):
                notifier.add(late)

            def get_id(self):
                return "subscriber"

        notifier.add(Subscriber())
        await notifier.notify_parallel(1)

        assert late.received == []
        assert notifier.has(late)
