from __future__ import annotations

import threading

import pytest

from ofd_graphics.identifiers import STID, IDAllocator


def test_first_identifier_is_one() -> None:
    allocator = IDAllocator()
    assert allocator.current == 0
    assert allocator.next_id() == 1
    assert allocator.current == 1


def test_identifiers_increase_without_gaps() -> None:
    allocator = IDAllocator()
    issued = [allocator.next_id() for _ in range(5)]
    assert issued == [1, 2, 3, 4, 5]
    assert all(isinstance(value, STID) for value in issued)


def test_concurrent_allocation_has_no_duplicates() -> None:
    allocator = IDAllocator()
    results: list[int] = []
    lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        local = [allocator.next_id() for _ in range(250)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(results) == list(range(1, 2001))
    assert allocator.current == 2000


def test_stid_renders_as_plain_integer() -> None:
    value = STID(7)
    assert str(value) == "7"
    assert f"{value}" == "7"
    assert repr(value) == "STID(7)"
    assert value == 7


@pytest.mark.parametrize("value", [0, -3])
def test_stid_rejects_non_positive_values(value: int) -> None:
    with pytest.raises(ValueError):
        STID(value)
