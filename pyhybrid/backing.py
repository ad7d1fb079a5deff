"""Operation surface shared by both backings and the tag that selects one."""
from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Optional, Protocol

from .avltree import AVLTree
from .linear import LinearArray

__all__ = ["Backing", "BackingKind"]


class Backing(Protocol):
    """What `HybridDict` needs from the structure it routes to."""

    def insert(self, key: int, value: str) -> None:
        """Add `key` unless present; duplicates are ignored."""
        ...

    def delete(self, key: int) -> Optional[int]:
        """Remove `key`; return it, or ``None`` when absent."""
        ...

    def get(self, key: int) -> Optional[str]:
        ...

    def predecessor(self, key: int) -> Optional[int]:
        ...

    def successor(self, key: int) -> Optional[int]:
        ...

    def range_count(self, low: int, high: int) -> Optional[int]:
        """Count between two bounds; ``None`` marks an invalid range."""
        ...

    def items(self) -> list[tuple[int, str]]:
        ...

    def __iter__(self) -> Iterator[tuple[int, str]]:
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, key: int) -> bool:
        ...


class BackingKind(enum.Enum):
    """Available backing structures."""
    LINEAR = "linear"
    TREE = "tree"

    def create(self) -> Backing:
        if self is BackingKind.LINEAR:
            return LinearArray()
        return AVLTree()
