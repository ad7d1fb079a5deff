"""Growable-array backing used when the expected size is small.

Entries live in two parallel fixed-capacity buffers (keys and values) that
double when full. Lookups are linear scans over the populated prefix and
entries stay in insertion order until `sort` is called, which runs an
in-place, stable merge sort.

Positional operations (`predecessor`, `successor`, `range_count`) work on the
*current* buffer order, so their results depend on whether the buffer has
been sorted since the last insertion.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

__all__ = ["LinearArray"]

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY = 10


class LinearArray:
    """Unsorted int → str mapping over a doubling buffer."""

    def __init__(self, capacity: int = _INITIAL_CAPACITY):
        self._keys: list[int] = [0] * capacity
        self._values: list[str] = [""] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._keys)

    def _grow(self) -> None:
        new_cap = max(1, self.capacity * 2)
        logger.debug("growing linear buffer %d → %d", self.capacity, new_cap)
        self._keys.extend([0] * (new_cap - self.capacity))
        self._values.extend([""] * (new_cap - len(self._values)))

    # ---------------------------------------------------------------------
    # Mutation API
    # ---------------------------------------------------------------------
    def insert(self, key: int, value: str) -> None:
        """Append `key` unless it is already present."""
        if self.index_of(key) != -1:
            return
        if self._size == self.capacity:
            self._grow()
        self._keys[self._size] = key
        self._values[self._size] = value
        self._size += 1

    def delete(self, key: int) -> Optional[int]:
        """Remove `key` shifting the tail left; return it or ``None``."""
        idx = self.index_of(key)
        if idx == -1:
            return None
        for i in range(idx, self._size - 1):
            self._keys[i] = self._keys[i + 1]
            self._values[i] = self._values[i + 1]
        self._size -= 1
        return key

    def sort(self) -> None:
        """Sort the populated prefix by key (stable merge sort)."""
        self._merge_sort(0, self._size - 1)

    def _merge_sort(self, left: int, right: int) -> None:
        if left >= right:
            return
        mid = (left + right) // 2
        self._merge_sort(left, mid)
        self._merge_sort(mid + 1, right)
        self._merge(left, mid, right)

    def _merge(self, left: int, mid: int, right: int) -> None:
        lkeys, lvals = self._keys[left : mid + 1], self._values[left : mid + 1]
        rkeys, rvals = self._keys[mid + 1 : right + 1], self._values[mid + 1 : right + 1]
        i = j = 0
        k = left
        while i < len(lkeys) and j < len(rkeys):
            # <= keeps equal keys in their original order
            if lkeys[i] <= rkeys[j]:
                self._keys[k], self._values[k] = lkeys[i], lvals[i]
                i += 1
            else:
                self._keys[k], self._values[k] = rkeys[j], rvals[j]
                j += 1
            k += 1
        for key, value in zip(lkeys[i:], lvals[i:]):
            self._keys[k], self._values[k] = key, value
            k += 1
        for key, value in zip(rkeys[j:], rvals[j:]):
            self._keys[k], self._values[k] = key, value
            k += 1

    # ---------------------------------------------------------------------
    # Query API
    # ---------------------------------------------------------------------
    def index_of(self, key: int) -> int:
        """Position of `key` in the buffer, or -1."""
        for i in range(self._size):
            if self._keys[i] == key:
                return i
        return -1

    def key_at(self, index: int) -> Optional[int]:
        if 0 <= index < self._size:
            return self._keys[index]
        logger.debug("index %d out of bounds (size=%d)", index, self._size)
        return None

    def get(self, key: int) -> Optional[str]:
        idx = self.index_of(key)
        return self._values[idx] if idx != -1 else None

    def predecessor(self, key: int) -> Optional[int]:
        """Key stored just before `key` in the buffer."""
        idx = self.index_of(key)
        return self.key_at(idx - 1) if idx != -1 else None

    def successor(self, key: int) -> Optional[int]:
        """Key stored just after `key` in the buffer."""
        idx = self.index_of(key)
        return self.key_at(idx + 1) if idx != -1 else None

    def range_count(self, low: int, high: int) -> Optional[int]:
        """Number of positions strictly between two *existing* keys.

        Returns ``None`` when either key is missing or `low` sits after
        `high` in the buffer.
        """
        start, end = self.index_of(low), self.index_of(high)
        if start == -1 or end == -1:
            logger.warning("range bound missing: %d or %d not present", low, high)
            return None
        if start > end:
            logger.warning("range start %d is positioned after end %d", low, high)
            return None
        # Adjacent or identical positions hold nothing in between.
        return max(0, end - start - 1)

    def items(self) -> list[tuple[int, str]]:
        return list(zip(self._keys[: self._size], self._values[: self._size]))

    # ------------------------------------------------------------------
    # Iteration helpers (buffer order)
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[tuple[int, str]]:
        for i in range(self._size):
            yield self._keys[i], self._values[i]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: int) -> bool:
        return self.index_of(key) != -1
