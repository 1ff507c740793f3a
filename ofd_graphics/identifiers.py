"""Object identifier allocation for a single OFD document."""

from __future__ import annotations

import threading

__all__ = ["STID", "IDAllocator"]


class STID(int):
    """Object identifier as written into OFD ``ID`` attributes."""

    def __new__(cls, value: int) -> "STID":
        if value < 1:
            raise ValueError(f"Object identifiers must be positive, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"STID({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


class IDAllocator:
    """Thread-safe, monotonically increasing identifier source.

    The counter starts at 0 so the first identifier handed out is 1. The
    current value doubles as the document's ``MaxUnitID``.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def next_id(self) -> STID:
        with self._lock:
            self._value += 1
            return STID(self._value)

    @property
    def current(self) -> int:
        with self._lock:
            return self._value
