"""Command-line front-end: seed a dictionary, run one operation, print the result.

Example::

    python -m pyhybrid --threshold 1000 --file keys.txt range 10000000 20000000
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from .hybrid import HybridDict
from .seed import seed

__all__ = ["main", "build_parser"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyhybrid", description=__doc__.splitlines()[0])
    parser.add_argument("--threshold", type=int, required=True, help="Expected number of entries")
    parser.add_argument("--file", type=Path, help="Text file of keys to seed from")
    parser.add_argument("--seed", type=int, help="Random seed for generated keys and values")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("generate", help="Print a fresh unused key")
    sub.add_parser("list", help="Print all entries in key order")
    add = sub.add_parser("add", help="Add KEY with VALUE")
    add.add_argument("key", type=int)
    add.add_argument("value")
    for name, help_ in (
        ("remove", "Remove KEY"),
        ("get", "Print the value of KEY"),
        ("next", "Print the successor of KEY"),
        ("prev", "Print the predecessor of KEY"),
    ):
        cmd = sub.add_parser(name, help=help_)
        cmd.add_argument("key", type=int)
    rng = sub.add_parser("range", help="Count keys between KEY1 and KEY2 (exclusive)")
    rng.add_argument("key1", type=int)
    rng.add_argument("key2", type=int)
    return parser


def _run(hdict: HybridDict, args: argparse.Namespace) -> int:
    cmd = args.command
    if cmd == "generate":
        print(hdict.generate_key())
    elif cmd == "list":
        for key, value in hdict.all_entries_sorted():
            print(f"{key} -- {value}")
    elif cmd == "add":
        hdict.insert(args.key, args.value)
        print(f"{args.key} -- {hdict.lookup(args.key)}")
    elif cmd == "remove":
        if hdict.delete(args.key) is None:
            print(f"key {args.key} not found", file=sys.stderr)
            return 1
        print(f"removed {args.key}")
    elif cmd == "get":
        value = hdict.lookup(args.key)
        if value is None:
            print(f"key {args.key} not found", file=sys.stderr)
            return 1
        print(value)
    elif cmd in ("next", "prev"):
        found = hdict.successor(args.key) if cmd == "next" else hdict.predecessor(args.key)
        if found is None:
            print(f"key {args.key} has no {cmd} key", file=sys.stderr)
            return 1
        print(found)
    elif cmd == "range":
        count = hdict.range_count(args.key1, args.key2)
        if count is None:
            print(f"invalid range {args.key1}..{args.key2}", file=sys.stderr)
            return 1
        print(count)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    hdict = HybridDict.configure(args.threshold, rng=random.Random(args.seed))
    if args.file is not None:
        try:
            seed(hdict, args.file, limit=args.threshold)
        except (OSError, ValueError) as exc:
            logger.error("cannot seed from %s: %s", args.file, exc)
            return 2
    return _run(hdict, args)
