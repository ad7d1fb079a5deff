"""Height-balanced (AVL) binary search tree used as the large-size backing.

Nodes own their children exclusively and keep no parent pointers, so every
structural change is propagated up the recursion through return values: the
module-level helpers take a subtree root and hand back the (possibly new)
root of that subtree. `AVLTree` merely reassigns its root to whatever the
helper returns.

Complexities (given the balance invariant):
    • search   – O(log n)
    • insert   – O(log n)
    • delete   – O(log n)
    • iterate  – O(n)
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

__all__ = [
    "AVLTree",
    "search",
    "insert",
    "delete",
    "rotate_left",
    "rotate_right",
    "walk",
    "range_count",
]


class _Node:
    __slots__ = ("key", "value", "height", "left", "right")

    def __init__(self, key: int, value: str):
        self.key = key
        self.value = value
        self.height = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.key!r}:{self.value!r} h={self.height}>"


# ---------------------------------------------------------------------
# Height bookkeeping
# ---------------------------------------------------------------------
def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


# ---------------------------------------------------------------------
# Rotations 🔄
# ---------------------------------------------------------------------
def rotate_left(node: _Node) -> _Node:
    """Promote `node.right`; its left subtree becomes `node.right`."""
    pivot = node.right
    assert pivot is not None, "left rotation needs a right child"
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_right(node: _Node) -> _Node:
    """Promote `node.left`; its right subtree becomes `node.left`."""
    pivot = node.left
    assert pivot is not None, "right rotation needs a left child"
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


# ---------------------------------------------------------------------
# Query API
# ---------------------------------------------------------------------
def search(node: Optional[_Node], key: int) -> Optional[_Node]:
    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return node
    return None


def walk(node: Optional[_Node]) -> Iterator[tuple[int, str]]:
    """Yield ``(key, value)`` pairs of the subtree in ascending key order."""
    if node is None:
        return
    yield from walk(node.left)
    yield node.key, node.value
    yield from walk(node.right)


def range_count(node: Optional[_Node], low: int, high: int) -> int:
    """Count keys strictly between `low` and `high`.

    The bounds do not have to be present in the tree. Subtrees that cannot
    hold a key inside the open interval are never visited.
    """
    if node is None:
        return 0
    count = 1 if low < node.key < high else 0
    if node.key > low:
        count += range_count(node.left, low, high)
    if node.key < high:
        count += range_count(node.right, low, high)
    return count


# ---------------------------------------------------------------------
# Mutation API
# ---------------------------------------------------------------------
def insert(node: Optional[_Node], key: int, value: str) -> _Node:
    """Insert `key` below `node` and return the rebalanced subtree root.

    An existing `key` is left untouched together with its value.
    """
    if node is None:
        return _Node(key, value)
    if key < node.key:
        node.left = insert(node.left, key, value)
    elif key > node.key:
        node.right = insert(node.right, key, value)
    else:
        return node

    _update_height(node)
    bf = _balance(node)
    # The inserted key tells us which grandchild grew.
    if bf > 1:
        assert node.left is not None
        if key > node.left.key:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if bf < -1:
        assert node.right is not None
        if key < node.right.key:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    """Remove `key` below `node` and return the rebalanced subtree root."""
    if node is None:
        return None
    if key < node.key:
        node.left = delete(node.left, key)
    elif key > node.key:
        node.right = delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key, node.value = successor.key, successor.value
        node.right = delete(node.right, successor.key)

    _update_height(node)
    bf = _balance(node)
    # No inserted key to compare against: inspect the taller child instead.
    if bf > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if bf < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree:
    """Ordered int → str mapping kept height-balanced on every mutation."""

    def __init__(self):
        self.root: Optional[_Node] = None

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, key: int, value: str) -> None:
        self.root = insert(self.root, key, value)

    def delete(self, key: int) -> Optional[int]:
        """Remove `key`; return it, or ``None`` when it was not present."""
        if search(self.root, key) is None:
            return None
        self.root = delete(self.root, key)
        return key

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def search(self, key: int) -> Optional[_Node]:
        return search(self.root, key)

    def get(self, key: int) -> Optional[str]:
        node = search(self.root, key)
        return node.value if node is not None else None

    def predecessor(self, key: int) -> Optional[int]:
        """Key of the left child of `key`'s node, not the in-order predecessor."""
        node = search(self.root, key)
        if node is None or node.left is None:
            return None
        return node.left.key

    def successor(self, key: int) -> Optional[int]:
        """Key of the right child of `key`'s node, not the in-order successor."""
        node = search(self.root, key)
        if node is None or node.right is None:
            return None
        return node.right.key

    def range_count(self, low: int, high: int) -> Optional[int]:
        return range_count(self.root, low, high)

    def items(self) -> list[tuple[int, str]]:
        return list(walk(self.root))

    @property
    def height(self) -> int:
        return _height(self.root)

    def is_balanced(self) -> bool:
        """Check ordering, height bookkeeping and the AVL balance rule."""

        def check(node: Optional[_Node], low: Optional[int], high: Optional[int]) -> int:
            if node is None:
                return 0
            if (low is not None and node.key <= low) or (high is not None and node.key >= high):
                raise ValueError(f"ordering violated at {node.key}")
            lh = check(node.left, low, node.key)
            rh = check(node.right, node.key, high)
            if abs(lh - rh) > 1 or node.height != 1 + max(lh, rh):
                raise ValueError(f"balance violated at {node.key}")
            return node.height

        try:
            check(self.root, None, None)
        except ValueError:
            return False
        return True

    # ------------------------------------------------------------------
    # Iteration helpers (ordered)
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[tuple[int, str]]:
        return walk(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in walk(self.root))

    def __contains__(self, key: int) -> bool:
        return search(self.root, key) is not None
