"""Unit tests for SequenceCounter."""

import threading

import pytest

from equipment_records.errors import RecordStoreError, SequenceOverflowError
from equipment_records.sequence import SequenceCounter


def test_unseen_device_has_zero_count():
    counter = SequenceCounter()
    assert counter.current_count(1) == 0
    assert counter.devices() == []


def test_next_sequence_starts_at_one_and_increments():
    counter = SequenceCounter()
    assert [counter.next_sequence(1) for _ in range(3)] == [1, 2, 3]
    assert counter.current_count(1) == 3


def test_current_count_has_no_side_effects():
    counter = SequenceCounter()
    counter.current_count("dev-a")
    counter.current_count("dev-a")
    assert counter.devices() == []
    assert counter.next_sequence("dev-a") == 1


def test_devices_are_independent():
    counter = SequenceCounter()
    counter.next_sequence(1)
    counter.next_sequence(1)
    counter.next_sequence("1")

    assert counter.current_count(1) == 2
    assert counter.current_count("1") == 1
    assert counter.devices() == [1, "1"]


# ---- Overflow -------------------------------------------------------------


def test_overflow_raises_and_keeps_count():
    counter = SequenceCounter(max_sequence=2)
    counter.next_sequence(7)
    counter.next_sequence(7)

    with pytest.raises(SequenceOverflowError) as excinfo:
        counter.next_sequence(7)

    assert excinfo.value.device_id == 7
    assert excinfo.value.limit == 2
    assert isinstance(excinfo.value, RecordStoreError)
    assert counter.current_count(7) == 2


def test_overflow_is_per_device():
    counter = SequenceCounter(max_sequence=1)
    counter.next_sequence("a")
    assert counter.next_sequence("b") == 1


# ---- Concurrency ----------------------------------------------------------


def test_concurrent_next_sequence_has_no_gaps_or_reuse():
    counter = SequenceCounter()
    results = []
    results_lock = threading.Lock()

    def worker():
        local = [counter.next_sequence("shared") for _ in range(250)]
        with results_lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1, 2001))
    assert counter.current_count("shared") == 2000
