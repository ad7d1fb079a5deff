"""PyHybrid: a keyed dictionary that picks its backing structure from a size hint.

Small expected sizes are served by a growable linear array, larger ones by a
height-balanced (AVL) binary search tree. `pyhybrid.HybridDict` exposes one
operation surface over both, while the backings themselves stay importable
for direct use and testing.
"""

from __future__ import annotations

__all__ = [
    "HybridDict",
    "AVLTree",
    "LinearArray",
    "Backing",
    "BackingKind",
]

from .avltree import AVLTree
from .backing import Backing, BackingKind
from .hybrid import HybridDict
from .linear import LinearArray
