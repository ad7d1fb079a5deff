"""Key validation and random key/value synthesis.

Randomness always comes from an explicitly passed `random.Random` so that
callers (and tests) can make generation deterministic by seeding it.
"""
from __future__ import annotations

import random
from collections.abc import Callable

__all__ = [
    "KEY_MIN",
    "KEY_MAX",
    "check_key",
    "check_value",
    "random_key",
    "random_value",
    "fresh_key",
]

KEY_MIN = 10_000_000
KEY_MAX = 99_999_999

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_MAX_ATTEMPTS = 1_000_000

_FIRST_NAMES = ("Alice", "Bob", "Charlie", "David", "Eva", "Frank", "Grace", "Harry")
_LAST_NAMES = ("Smith", "Johnson", "Williams", "Jones", "Brown", "Davis", "Miller", "Gill")


def check_key(key: object) -> int:
    """Return `key` if it is a signed 64-bit integer, raise otherwise."""
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"key must be int, not {type(key).__name__}")
    if not _INT64_MIN <= key <= _INT64_MAX:
        raise ValueError(f"key {key} does not fit in 64 bits")
    return key


def check_value(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"value must be str, not {type(value).__name__}")
    return value


def random_key(rng: random.Random) -> int:
    """Eight-digit key, uniform over [KEY_MIN, KEY_MAX]."""
    return rng.randint(KEY_MIN, KEY_MAX)


def random_value(rng: random.Random) -> str:
    return f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"


def fresh_key(rng: random.Random, taken: Callable[[int], bool]) -> int:
    """Draw keys until one is not `taken` (rejection sampling)."""
    for _ in range(_MAX_ATTEMPTS):
        key = random_key(rng)
        if not taken(key):
            return key
    raise RuntimeError(f"no free key found after {_MAX_ATTEMPTS} attempts")
