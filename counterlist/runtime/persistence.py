# coding: utf-8
"""
Background persistence for counterlist.

Every mutation of the store schedules a save and returns immediately. Saves
run on a single worker thread, so they are written in the order they were
scheduled and the last one written is always the latest state.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from threading import Lock
from typing import Callable, Optional

logger = logging.getLogger(__name__)


SaveJob = Callable[[], bool]


class SaveQueue:
    """
    Fire-and-forget, single-writer save queue.

    Usage:
        queue = SaveQueue()
        queue.submit(lambda: storage_write(snapshot))
        queue.flush()   # wait for pending saves (tests, shutdown)
        queue.close()

    With background=False jobs run inline in submit(). Either way only one
    job runs at a time.
    """

    def __init__(self, background: bool = True):
        """
        Initialize the queue.

        Args:
            background: Run jobs on a worker thread instead of inline
        """
        self._background = background
        self._executor: Optional[ThreadPoolExecutor] = (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="counterlist-save")
            if background else None
        )
        self._lock = Lock()
        self._run_lock = Lock()
        self._pending: set[Future] = set()
        self._closed = False

    @property
    def background(self) -> bool:
        return self._background

    def submit(self, job: SaveJob) -> Future:
        """
        Schedule a save. Never raises for failures inside the job.

        Returns:
            Future resolving to the job's result (False if it raised).
            Callers that do not care simply drop it.
        """
        if self._executor is None:
            return self._run_inline(job)

        with self._lock:
            if self._closed:
                logger.debug("Save queue closed, running save inline")
                return self._run_inline(job)
            future = self._executor.submit(self._run, job)
            self._pending.add(future)
        future.add_done_callback(self._discard)
        return future

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for every save scheduled so far.

        Returns:
            True if all pending saves finished within the timeout
        """
        with self._lock:
            pending = list(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        """Flush and shut down the worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def _discard(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _run_inline(self, job: SaveJob) -> Future:
        future: Future = Future()
        future.set_result(self._run(job))
        return future

    def _run(self, job: SaveJob) -> bool:
        with self._run_lock:
            try:
                return job()
            except Exception as e:
                logger.warning(f"Save job failed: {e}")
                return False
