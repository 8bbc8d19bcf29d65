import io
import os
import threading
import time

import pytest

from pathtrace.threadpool import SyncedStream, ThreadPool, Timer


@pytest.fixture
def pool():
    p = ThreadPool(4)
    yield p
    p.paused = False
    p.shutdown()


def test_thread_count_explicit(pool):
    assert pool.thread_count == 4


def test_thread_count_zero_uses_cpu_count():
    p = ThreadPool(0)
    try:
        assert p.thread_count == (os.cpu_count() or 1)
    finally:
        p.shutdown()


def test_submit_returns_value(pool):
    future = pool.submit(lambda a, b: a * b, 6, 7)
    assert future.result(timeout=5) == 42


def test_submit_none_result_becomes_true(pool):
    seen = []
    future = pool.submit(seen.append, "x")
    assert future.result(timeout=5) is True
    assert seen == ["x"]


def test_submit_propagates_exception(pool):
    def boom():
        raise KeyError("bad")

    future = pool.submit(boom)
    with pytest.raises(KeyError):
        future.result(timeout=5)


def test_push_task_with_args_and_wait(pool):
    results = []
    lock = threading.Lock()

    def add(value):
        with lock:
            results.append(value)

    for i in range(20):
        pool.push_task(add, i)
    pool.wait_for_tasks()
    assert sorted(results) == list(range(20))
    assert pool.tasks_total == 0


def test_failing_pushed_task_does_not_stall_pool(pool):
    def boom():
        raise RuntimeError("fail")

    pool.push_task(boom)
    future = pool.submit(lambda: 5)
    pool.wait_for_tasks()
    assert pool.tasks_total == 0
    assert future.result(timeout=5) == 5


def test_paused_pool_keeps_tasks_queued(pool):
    pool.paused = True
    done = []
    for i in range(3):
        pool.push_task(done.append, i)
    time.sleep(0.05)
    assert pool.tasks_queued == 3
    assert pool.tasks_total == 3
    assert pool.tasks_running == 0
    pool.wait_for_tasks()
    assert done == []
    pool.paused = False
    pool.wait_for_tasks()
    assert sorted(done) == [0, 1, 2]
    assert pool.tasks_queued == 0


def test_parallelize_loop_covers_range_once(pool):
    hits = []
    lock = threading.Lock()

    def loop(start, end):
        with lock:
            hits.extend(range(start, end))

    pool.parallelize_loop(0, 100, loop)
    assert sorted(hits) == list(range(100))
    assert pool.tasks_total == 0
    assert pool.tasks_queued == 0


def test_parallelize_loop_reversed_bounds(pool):
    hits = []
    lock = threading.Lock()

    def loop(start, end):
        with lock:
            hits.extend(range(start, end))

    pool.parallelize_loop(10, 0, loop)
    assert sorted(hits) == list(range(10))
    assert pool.tasks_total == 0
    assert pool.tasks_queued == 0


def test_parallelize_loop_block_layout(pool):
    blocks = []
    lock = threading.Lock()

    def loop(start, end):
        with lock:
            blocks.append((start, end))

    pool.parallelize_loop(0, 10, loop, 3)
    assert sorted(blocks) == [(0, 3), (3, 6), (6, 10)]
    assert pool.tasks_total == 0
    assert pool.tasks_queued == 0


def test_parallelize_loop_more_blocks_than_items(pool):
    blocks = []
    lock = threading.Lock()

    def loop(start, end):
        with lock:
            blocks.append((start, end))

    pool.parallelize_loop(5, 8, loop, 50)
    assert sorted(blocks) == [(5, 6), (6, 7), (7, 8)]
    assert pool.tasks_total == 0
    assert pool.tasks_queued == 0


def test_parallelize_loop_empty_range(pool):
    calls = []
    pool.parallelize_loop(3, 3, lambda s, e: calls.append((s, e)))
    assert calls == []


def test_parallelize_loop_reraises(pool):
    def loop(start, end):
        raise ValueError("block failed")

    with pytest.raises(ValueError):
        pool.parallelize_loop(0, 8, loop)


def test_reset_changes_thread_count_and_keeps_queue(pool):
    pool.paused = True
    done = []
    pool.push_task(done.append, "queued")
    pool.reset(2)
    assert pool.thread_count == 2
    assert pool.paused is True
    assert pool.tasks_queued == 1
    pool.paused = False
    pool.wait_for_tasks()
    assert done == ["queued"]


def test_context_manager_runs_all_tasks():
    done = []
    with ThreadPool(2) as p:
        for i in range(5):
            p.push_task(done.append, i)
    assert sorted(done) == list(range(5))


def test_synced_stream_print_and_println():
    buffer = io.StringIO()
    stream = SyncedStream(buffer)
    stream.print("a", 1, "b")
    stream.println("c", 2)
    assert buffer.getvalue() == "a1bc2\n"


def test_synced_stream_from_threads_keeps_lines_whole():
    buffer = io.StringIO()
    stream = SyncedStream(buffer)
    with ThreadPool(4) as p:
        for i in range(50):
            p.push_task(stream.println, "line", i)
    lines = buffer.getvalue().splitlines()
    assert sorted(lines) == sorted(f"line{i}" for i in range(50))


def test_timer_measures_elapsed():
    timer = Timer()
    assert timer.ms() == 0
    timer.start()
    time.sleep(0.03)
    timer.stop()
    assert timer.ms() >= 25