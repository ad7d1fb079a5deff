"""High-level dictionary interface choosing its backing from a size hint.

The backing is picked exactly once, at construction: small expected sizes
get a `LinearArray`, larger ones an `AVLTree`. Every operation is then routed
to that single backing; there is no migration between the two.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import Optional

from .backing import Backing, BackingKind
from .keys import check_key, check_value, fresh_key, random_value

__all__ = ["HybridDict"]

logger = logging.getLogger(__name__)

_THRESHOLD = 500  # expected sizes up to this use the linear backing


class HybridDict:
    """Keyed int → str dictionary over a linear or a tree backing."""

    def __init__(self, threshold: int, *, rng: Optional[random.Random] = None):
        if isinstance(threshold, bool) or not isinstance(threshold, int):
            raise TypeError(f"threshold must be int, not {type(threshold).__name__}")
        self._threshold = threshold
        self._kind = BackingKind.LINEAR if threshold <= _THRESHOLD else BackingKind.TREE
        self._backing: Backing = self._kind.create()
        self._rng = rng if rng is not None else random.Random()
        logger.debug("threshold=%d → %s backing", threshold, self._kind.value)

    @classmethod
    def configure(cls, threshold: int, *, rng: Optional[random.Random] = None) -> "HybridDict":
        """Create a dictionary whose backing suits `threshold` entries."""
        return cls(threshold, rng=rng)

    @property
    def kind(self) -> BackingKind:
        return self._kind

    @property
    def threshold(self) -> int:
        return self._threshold

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, key: int, value: str) -> None:
        check_key(key)
        check_value(value)
        if key in self._backing:
            logger.debug("key %d already present, insert ignored", key)
            return
        self._backing.insert(key, value)

    def delete(self, key: int) -> Optional[int]:
        """Remove `key`; return it, or ``None`` if it was not present."""
        removed = self._backing.delete(check_key(key))
        if removed is None:
            logger.debug("delete: key %d not found", key)
        return removed

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def lookup(self, key: int) -> Optional[str]:
        value = self._backing.get(check_key(key))
        if value is None:
            logger.debug("lookup: key %d not found", key)
        return value

    def predecessor(self, key: int) -> Optional[int]:
        """Neighbouring key on the lower side of `key`.

        Tree backing: the left child of `key`'s node. Linear backing: the key
        stored one slot before `key`. ``None`` if `key` or its neighbour is
        missing.
        """
        return self._backing.predecessor(check_key(key))

    def successor(self, key: int) -> Optional[int]:
        """Mirror of `predecessor` on the upper side."""
        return self._backing.successor(check_key(key))

    def range_count(self, low: int, high: int) -> Optional[int]:
        """Count entries between `low` and `high` (both exclusive).

        The tree backing counts keys whose *value* lies in the open interval,
        the bounds need not be stored keys. The linear backing counts the
        *positions* between two stored keys and returns ``None`` when either
        is missing or out of order.
        """
        return self._backing.range_count(check_key(low), check_key(high))

    def all_entries_sorted(self) -> list[tuple[int, str]]:
        if self._kind is BackingKind.LINEAR:
            self._backing.sort()  # type: ignore[attr-defined]
        return self._backing.items()

    # ------------------------------------------------------------------
    # Generation 🎲
    # ------------------------------------------------------------------
    def generate_key(self) -> int:
        """Random 8-digit key not yet present."""
        return fresh_key(self._rng, lambda k: self._backing.get(k) is not None)

    def generate_value(self) -> str:
        return random_value(self._rng)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._backing)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key in self._backing

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return iter(self._backing)

    def __repr__(self) -> str:  # pragma: no cover
        return f"HybridDict<{self._kind.value} n={len(self)} threshold={self._threshold}>"
