"""Tests for the toast NotificationCenter."""
import time

from streamlit_ui.state.notifications import DEFAULT_TTL_SECONDS, NotificationCenter


class TestNotificationCenter:

    def test_show_queues_in_order(self, notifications):
        first = notifications.show("Log created successfully", "success")
        second = notifications.show("Failed to delete log", "error")

        items = notifications.notifications
        assert [n.id for n in items] == [first, second]
        assert items[0].kind == "success"
        assert items[1].message == "Failed to delete log"

    def test_ids_are_unique(self, notifications):
        ids = {notifications.show("same", "success") for _ in range(5)}
        assert len(ids) == 5

    def test_each_message_gets_its_own_timer(self, notifications, fake_timers):
        notifications.show("a")
        notifications.show("b")

        assert len(fake_timers) == 2
        assert all(t.started and t.daemon for t in fake_timers)
        assert all(t.interval == 3.0 for t in fake_timers)

    def test_expiry_removes_only_its_own_message(self, notifications, fake_timers):
        first = notifications.show("a")
        second = notifications.show("b")

        fake_timers[0].fire()

        assert [n.id for n in notifications.notifications] == [second]
        assert first not in [n.id for n in notifications.notifications]

    def test_manual_remove_cancels_timer(self, notifications, fake_timers):
        notification_id = notifications.show("a")

        notifications.remove(notification_id)

        assert notifications.notifications == []
        assert fake_timers[0].cancelled
        # A late fire after dismissal is harmless
        fake_timers[0].fire()
        assert notifications.notifications == []

    def test_remove_unknown_is_noop(self, notifications):
        notifications.show("a")
        notifications.remove("toast-999")
        assert len(notifications.notifications) == 1

    def test_expire_after_remove_does_not_touch_newer(self, notifications, fake_timers):
        first = notifications.show("a")
        notifications.remove(first)
        notifications.show("b")

        # Bypass the cancel flag: the callback itself must be id-scoped.
        fake_timers[0].function(*fake_timers[0].args)

        assert [n.message for n in notifications.notifications] == ["b"]

    def test_clear_cancels_everything(self, notifications, fake_timers):
        notifications.show("a")
        notifications.show("b")

        notifications.clear()

        assert notifications.notifications == []
        assert all(t.cancelled for t in fake_timers)

    def test_snapshot_is_a_copy(self, notifications):
        notifications.show("a")
        snapshot = notifications.notifications
        snapshot.clear()
        assert len(notifications.notifications) == 1


def test_default_ttl():
    assert NotificationCenter().ttl_seconds == DEFAULT_TTL_SECONDS == 3.0


def test_real_timer_expires():
    center = NotificationCenter(ttl_seconds=0.05)
    center.show("short lived")

    deadline = time.monotonic() + 2.0
    while center.notifications and time.monotonic() < deadline:
        time.sleep(0.01)

    assert center.notifications == []
