"""Unit tests for the process-wide message counter."""

from __future__ import annotations

import threading

from msgsocket.messages.counter import MessageCounter


def test_next_returns_post_increment_value() -> None:
    counter = MessageCounter()
    assert counter.value == 0
    assert counter.next() == 1
    assert counter.next() == 2
    assert counter.value == 2


def test_start_offset() -> None:
    counter = MessageCounter(start=41)
    assert counter.next() == 42


def test_concurrent_increments_are_unique_and_complete() -> None:
    counter = MessageCounter()
    per_thread = 500
    thread_count = 8
    results: list[list[int]] = [[] for _ in range(thread_count)]

    def _worker(index: int) -> None:
        for _ in range(per_thread):
            results[index].append(counter.next())

    threads = [threading.Thread(target=_worker, args=(i,)) for i in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    values = [value for chunk in results for value in chunk]
    assert len(values) == len(set(values)) == per_thread * thread_count
    assert sorted(values) == list(range(1, per_thread * thread_count + 1))
    for chunk in results:
        assert chunk == sorted(chunk)
