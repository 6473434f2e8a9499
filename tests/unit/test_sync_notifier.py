import pytest

from design_patterns.behavioral.observer import ObserverFailure, SyncNotifier
from design_patterns.metrics import metrics

SYNC_ERRORS = "observer_notifications_total{mode=sync,status=error}"


@pytest.fixture
def notifier():
    return SyncNotifier()


class TestRegistration:
    def test_add_same_observer_twice_keeps_one(self, notifier, recording_observer):
        observer = recording_observer("a")
        notifier.add(observer)
        notifier.add(observer)

        assert notifier.count() == 1
        assert notifier.has(observer)

        notifier.notify({"v": 1})
        assert observer.received == [{"v": 1}]

    def test_remove_then_has_is_false(self, notifier, recording_observer):
        observer = recording_observer("a")
        notifier.add(observer)
        notifier.remove(observer)

        assert not notifier.has(observer)
        assert notifier.count() == 0

    def test_remove_unknown_observer_is_noop(self, notifier, recording_observer):
        notifier.add(recording_observer("a"))
        notifier.remove(recording_observer("b"))
        assert notifier.count() == 1

    def test_equal_ids_are_distinct_observers(self, notifier, recording_observer):
        notifier.add(recording_observer("same"))
        notifier.add(recording_observer("same"))
        assert notifier.count() == 2

    def test_len_and_contains(self, notifier, recording_observer):
        observer = recording_observer("a")
        notifier.add(observer)
        assert len(notifier) == 1
        assert observer in notifier

    def test_empty_notifier_is_truthy(self, notifier):
        assert len(notifier) == 0
        assert notifier


class TestNotify:
    def test_every_observer_receives_same_payload(self, notifier, recording_observer):
        observers = [recording_observer(name) for name in ("A", "B", "C")]
        for observer in observers:
            notifier.add(observer)

        payload = {"v": 1}
        assert notifier.notify(payload) == []

        for observer in observers:
            assert observer.received == [payload]
            assert observer.received[0] is payload

    def test_clear_stops_delivery(self, notifier, recording_observer):
        observers = [recording_observer(name) for name in ("A", "B", "C")]
        for observer in observers:
            notifier.add(observer)

        notifier.notify({"v": 1})
        notifier.clear()
        notifier.notify({"v": 2})

        assert notifier.count() == 0
        for observer in observers:
            assert observer.received == [{"v": 1}]

    def test_notify_with_no_observers(self, notifier):
        assert notifier.notify("anything") == []

    def test_delivery_follows_registration_order(self, notifier, recording_observer):
        order = []
        for name in ("first", "second", "third"):
            notifier.add(recording_observer(name, log=order))

        notifier.notify(None)
        assert order == ["first", "second", "third"]

    def test_failing_observer_does_not_block_others(
        self, notifier, recording_observer, failing_observer
    ):
        before = recording_observer("before")
        broken = failing_observer("broken")
        after = recording_observer("after")
        for observer in (before, broken, after):
            notifier.add(observer)

        failures = notifier.notify("payload")

        assert before.received == ["payload"]
        assert after.received == ["payload"]
        assert failures == [ObserverFailure(observer_id="broken", error=broken.error)]

    def test_failure_is_logged_with_observer_id(self, notifier, failing_observer, mocker):
        mock_logger = mocker.patch("design_patterns.behavioral.observer.notifier.logger")
        broken = failing_observer("broken", error=ValueError("bad value"))
        notifier.add(broken)

        notifier.notify({})

        mock_logger.error.assert_called_once_with(
            "observer_notification_failed",
            observer_id="broken",
            error="bad value",
            error_type="ValueError",
            mode="sync",
        )

    def test_failure_increments_error_counter(self, notifier, failing_observer):
        before = metrics.snapshot().get(SYNC_ERRORS, 0)
        notifier.add(failing_observer("broken"))

        notifier.notify({})

        assert metrics.snapshot()[SYNC_ERRORS] == before + 1


class TestSnapshotIteration:
    def test_observer_added_during_notify_waits_for_next_call(
        self, notifier, recording_observer
    ):
        late = recording_observer("late")

        class Subscriber:
            def update(self, data):
                notifier.add(late)

            def get_id(self):
                return "subscriber"

        notifier.add(Subscriber())
        notifier.notify(1)
        assert late.received == []

        notifier.notify(2)
        assert late.received == [2]

    def test_observer_removed_during_notify_still_receives_current(
        self, notifier, recording_observer
    ):
        target = recording_observer("target")

        class Remover:
            def update(self, data):
                notifier.remove(target)

            def get_id(self):
                return "remover"

        notifier.add(Remover())
        notifier.add(target)

        notifier.notify(1)
        assert target.received == [1]

        notifier.notify(2)
        assert target.received == [1]

    def test_observer_without_usable_id_still_reported(self, notifier):
        class NoId:
            def update(self, data):
                raise RuntimeError("boom")

            def get_id(self):
                raise AttributeError("no id")

        notifier.add(NoId())
        failures = notifier.notify(None)

        assert len(failures) == 1
        assert "NoId" in failures[0].observer_id
