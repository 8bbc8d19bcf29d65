"""A fixed-size worker pool plus small helpers for synchronised output and timing."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
from collections import deque
from concurrent.futures import Future
from functools import partial
from typing import Any, Callable, Deque, List, Optional, TextIO

_log = logging.getLogger(__name__)


def _default_thread_count(requested: Optional[int]) -> int:
    if requested:
        return int(requested)
    return os.cpu_count() or 1


class ThreadPool:
    """Workers pop tasks from a shared queue and run them.

    A task pushed with :meth:`submit` gets a future; tasks that return None
    resolve their future to True. Setting :attr:`paused` stops workers from
    taking new tasks; tasks already running carry on.
    """

    def __init__(self, thread_count: Optional[int] = 0) -> None:
        self._cond = threading.Condition()
        self._tasks: Deque[Callable[[], Any]] = deque()
        self._total = 0
        self._paused = False
        self._running = True
        self._thread_count = _default_thread_count(thread_count)
        self._threads: List[threading.Thread] = []
        self._create_threads()

    # -- status -----------------------------------------------------------

    @property
    def tasks_queued(self) -> int:
        """Number of tasks waiting in the queue."""
        with self._cond:
            return len(self._tasks)

    @property
    def tasks_running(self) -> int:
        """Number of tasks currently being executed."""
        with self._cond:
            return self._total - len(self._tasks)

    @property
    def tasks_total(self) -> int:
        """Number of unfinished tasks, queued or running."""
        with self._cond:
            return self._total

    @property
    def thread_count(self) -> int:
        return self._thread_count

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        with self._cond:
            self._paused = bool(value)
            self._cond.notify_all()

    # -- submitting work --------------------------------------------------

    def push_task(self, task: Callable[..., Any], *args: Any) -> None:
        """Queue ``task(*args)`` without a way to observe its result."""
        job = partial(task, *args) if args else task
        with self._cond:
            self._total += 1
            self._tasks.append(job)
            self._cond.notify_all()

    def submit(self, task: Callable[..., Any], *args: Any) -> Future:
        """Queue ``task(*args)`` and return a future for its result."""
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = task(*args)
            except BaseException as exc:  # noqa: BLE001 - handed to the future
                future.set_exception(exc)
            else:
                future.set_result(True if result is None else result)

        self.push_task(run)
        return future

    def parallelize_loop(
        self,
        first_index: int,
        index_after_last: int,
        loop: Callable[[int, int], Any],
        num_blocks: int = 0,
    ) -> None:
        """Split ``[first_index, index_after_last)`` into blocks and run ``loop(start, end)`` on each.

        The bounds may be given in either order. Blocks until every block is
        done; the first exception raised by a block is re-raised.
        """
        first, last = int(first_index), int(index_after_last)
        if first == last:
            return
        if last < first:
            first, last = last, first
        last -= 1
        if not num_blocks:
            num_blocks = self._thread_count
        total_size = last - first + 1
        block_size = total_size // num_blocks
        if block_size == 0:
            block_size = 1
            num_blocks = total_size if total_size > 1 else 1

        futures = []
        for block in range(num_blocks):
            start = block * block_size + first
            end = last + 1 if block == num_blocks - 1 else (block + 1) * block_size + first
            futures.append(self.submit(loop, start, end))
        errors = [f.exception() for f in futures]
        for error in errors:
            if error is not None:
                raise error

    # -- lifecycle --------------------------------------------------------

    def wait_for_tasks(self) -> None:
        """Wait for all tasks; when paused, wait only for the running ones."""
        with self._cond:
            self._cond.wait_for(
                lambda: (self._total - len(self._tasks) == 0)
                if self._paused
                else self._total == 0
            )

    def reset(self, thread_count: Optional[int] = 0) -> None:
        """Wait for running tasks, then rebuild the workers with a new thread count.

        Queued tasks are kept and run by the new workers; the paused state is preserved.
        """
        was_paused = self._paused
        self.paused = True
        self.wait_for_tasks()
        self._destroy_threads()
        self._thread_count = _default_thread_count(thread_count)
        with self._cond:
            self._running = True
        self._create_threads()
        self.paused = was_paused

    def shutdown(self) -> None:
        """Wait for tasks as :meth:`wait_for_tasks` does, then stop the workers."""
        self.wait_for_tasks()
        self._destroy_threads()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    # -- internals --------------------------------------------------------

    def _create_threads(self) -> None:
        self._threads = [
            threading.Thread(target=self._worker, name=f"pool-worker-{i}", daemon=True)
            for i in range(self._thread_count)
        ]
        for thread in self._threads:
            thread.start()

    def _destroy_threads(self) -> None:
        with self._cond:
            self._running = False
            self._cond.notify_all()
        for thread in self._threads:
            thread.join()
        self._threads = []

    def _worker(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: not self._running or (not self._paused and bool(self._tasks))
                )
                if not self._running:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("task raised an exception")
            finally:
                with self._cond:
                    self._total -= 1
                    self._cond.notify_all()


class SyncedStream:
    """Writes to a stream under a lock so output from threads does not interleave."""

    def __init__(self, out_stream: Optional[TextIO] = None) -> None:
        self._out = out_stream if out_stream is not None else sys.stdout
        self._lock = threading.Lock()

    def print(self, *args: Any) -> None:
        """Write the items back to back, with no separator."""
        with self._lock:
            self._out.write("".join(str(item) for item in args))

    def println(self, *args: Any) -> None:
        """Write the items followed by a newline."""
        self.print(*args, "\n")


class Timer:
    """Measures elapsed wall time between :meth:`start` and :meth:`stop`."""

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self._elapsed = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> None:
        self._elapsed = time.perf_counter() - self._start

    def ms(self) -> int:
        """Whole milliseconds between the last start and stop."""
        return int(self._elapsed * 1000)