"""
Tests for the save queue and change notifier.
"""

import threading
import time

from counterlist.core.models import Counter
from counterlist.runtime.persistence import SaveQueue
from counterlist.runtime.subscription import ChangeNotifier, ChangeType


class TestSaveQueue:
    """Tests for SaveQueue."""

    def test_inline_runs_immediately(self):
        """Without a worker, jobs should run inside submit()."""
        ran = []
        queue = SaveQueue(background=False)
        queue.submit(lambda: ran.append(1) or True)
        assert ran == [1]
        assert queue.flush()

    def test_background_preserves_order(self):
        """Jobs should run one at a time in submission order."""
        order = []
        queue = SaveQueue()
        for i in range(20):
            queue.submit(lambda i=i: order.append(i) or True)
        assert queue.flush(timeout=5)
        queue.close()
        assert order == list(range(20))

    def test_submit_does_not_wait(self):
        """submit() should return while the job is still blocked."""
        gate = threading.Event()
        done = threading.Event()
        queue = SaveQueue()

        def job():
            gate.wait(5)
            done.set()
            return True

        queue.submit(job)
        assert not done.is_set()
        gate.set()
        assert queue.flush(timeout=5)
        assert done.is_set()
        queue.close()

    def test_failing_job_swallowed(self):
        """An exception in a job should not stop later jobs."""
        ran = []
        queue = SaveQueue()

        def bad():
            raise OSError("disk full")

        queue.submit(bad)
        queue.submit(lambda: ran.append("ok") or True)
        assert queue.flush(timeout=5)
        queue.close()
        assert ran == ["ok"]

    def test_submit_returns_result(self):
        """The returned future should carry the job's result."""
        queue = SaveQueue()
        assert queue.submit(lambda: True).result(timeout=5) is True
        assert SaveQueue(background=False).submit(lambda: False).result() is False
        queue.close()

    def test_failed_job_resolves_false(self):
        """A raising job should resolve to False."""
        def bad():
            raise OSError("disk full")

        queue = SaveQueue()
        assert queue.submit(bad).result(timeout=5) is False
        queue.close()

    def test_inline_jobs_never_overlap(self):
        """Inline saves from several threads should run one at a time."""
        guard = threading.Lock()
        state = {"active": 0, "max": 0}
        queue = SaveQueue(background=False)

        def job():
            with guard:
                state["active"] += 1
                state["max"] = max(state["max"], state["active"])
            time.sleep(0.002)
            with guard:
                state["active"] -= 1
            return True

        threads = [
            threading.Thread(target=lambda: [queue.submit(job) for _ in range(5)])
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)
        assert state["max"] == 1

    def test_submit_after_close_runs_inline(self):
        """A closed queue should still run saves."""
        ran = []
        queue = SaveQueue()
        queue.close()
        queue.submit(lambda: ran.append(1) or True)
        assert ran == [1]


class TestChangeNotifier:
    """Tests for ChangeNotifier."""

    def test_notify_counts_deliveries(self):
        """notify() should return the number of callbacks reached."""
        notifier = ChangeNotifier()
        notifier.subscribe(lambda e: None)
        notifier.subscribe(lambda e: None, change_types=[ChangeType.DELETE])
        assert notifier.notify(ChangeType.ADD, Counter(), index=0, size=1) == 1
        assert notifier.notify(ChangeType.DELETE, Counter(), index=0, size=0) == 2

    def test_delivery_tracking(self):
        """Subscriptions should track delivered events."""
        notifier = ChangeNotifier()
        sub = notifier.subscribe(lambda e: None)
        notifier.notify(ChangeType.LOAD, size=0)
        tracked = notifier.get_subscription(sub.id)
        assert tracked.events_delivered == 1
        assert tracked.last_event_at is not None

    def test_inactive_subscription_skipped(self):
        """Inactive subscriptions should not receive events."""
        notifier = ChangeNotifier()
        events = []
        sub = notifier.subscribe(events.append)
        sub.active = False
        assert notifier.notify(ChangeType.ADD, Counter()) == 0
        assert events == []
        assert notifier.subscription_count() == 0

    def test_unique_ids(self):
        """Subscription IDs should be unique."""
        notifier = ChangeNotifier()
        ids = {notifier.subscribe(lambda e: None).id for _ in range(50)}
        assert len(ids) == 50
