"""Seeding a dictionary from a plain-text file of keys."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from .hybrid import HybridDict

__all__ = ["load_keys", "seed"]

logger = logging.getLogger(__name__)


def load_keys(path: str | Path, limit: Optional[int] = None) -> Iterator[int]:
    """Yield whitespace-separated integer keys from `path`, at most `limit`."""
    if limit is not None and limit <= 0:
        return
    count = 0
    with open(path, "r", encoding="utf-8") as fp:
        for lineno, line in enumerate(fp, 1):
            for token in line.split():
                try:
                    key = int(token)
                except ValueError:
                    raise ValueError(f"{path}:{lineno}: not an integer key: {token!r}") from None
                yield key
                count += 1
                if limit is not None and count >= limit:
                    return


def seed(hdict: HybridDict, path: str | Path, limit: Optional[int] = None) -> int:
    """Insert keys from `path` with generated values; return how many were read."""
    n = 0
    for key in load_keys(path, limit):
        hdict.insert(key, hdict.generate_value())
        n += 1
    logger.info("seeded %d keys from %s (%d stored)", n, path, len(hdict))
    return n
