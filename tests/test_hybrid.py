"""Integration tests for the HybridDict dispatcher."""
import random

import pytest

from pyhybrid import AVLTree, BackingKind, HybridDict, LinearArray
from pyhybrid.keys import KEY_MAX, KEY_MIN


@pytest.fixture(params=[10, 5000], ids=["linear", "tree"])
def hdict(request):
    """Empty dictionary on each backing."""
    return HybridDict.configure(request.param, rng=random.Random(99))


@pytest.mark.parametrize(
    "threshold,kind,cls",
    [
        (0, BackingKind.LINEAR, LinearArray),
        (500, BackingKind.LINEAR, LinearArray),
        (501, BackingKind.TREE, AVLTree),
        (10_000, BackingKind.TREE, AVLTree),
    ],
)
def test_backing_selection(threshold, kind, cls):
    """Thresholds up to 500 pick the linear backing, above it the tree."""
    hdict = HybridDict(threshold)
    assert hdict.kind is kind
    assert hdict.threshold == threshold
    assert isinstance(hdict._backing, cls)


def test_basic_operations(hdict):
    """Insert, lookup and delete behave the same on both backings."""
    hdict.insert(12345678, "Alice Smith")
    assert hdict.lookup(12345678) == "Alice Smith"
    assert 12345678 in hdict
    assert len(hdict) == 1

    hdict.insert(12345678, "Bob Jones")
    assert hdict.lookup(12345678) == "Alice Smith"

    assert hdict.delete(12345678) == 12345678
    assert hdict.lookup(12345678) is None
    assert hdict.delete(12345678) is None
    assert len(hdict) == 0


def test_missing_key(hdict):
    assert hdict.lookup(1) is None
    assert hdict.predecessor(1) is None
    assert hdict.successor(1) is None
    assert hdict.delete(1) is None


def test_all_entries_sorted(hdict):
    keys = [50, 20, 80, 10, 30, 70, 90]
    for key in keys:
        hdict.insert(key, f"v{key}")
    assert hdict.all_entries_sorted() == [(k, f"v{k}") for k in sorted(keys)]


def test_tree_neighbours_are_children():
    hdict = HybridDict(1000)
    for key in (20, 10, 30, 5, 15):
        hdict.insert(key, "")
    assert hdict.predecessor(20) == 10
    assert hdict.successor(10) == 15
    assert hdict.successor(15) is None


def test_linear_neighbours_are_positional():
    hdict = HybridDict(100)
    for key in (30, 10, 20):
        hdict.insert(key, "")
    assert hdict.successor(30) == 10
    hdict.all_entries_sorted()
    assert hdict.successor(10) == 20
    assert hdict.predecessor(10) is None


def test_range_count_semantics_differ_per_backing():
    """Tree counts values in the interval; linear counts positions between keys."""
    tree = HybridDict(1000)
    linear = HybridDict(100)
    for key in (10, 20, 30, 40):
        tree.insert(key, "")
        linear.insert(key, "")

    assert tree.range_count(15, 35) == 2
    assert tree.range_count(10, 40) == 2
    assert linear.range_count(10, 40) == 2
    assert linear.range_count(15, 35) is None
    assert linear.range_count(40, 10) is None


def test_generate_key_is_fresh_and_in_range():
    hdict = HybridDict(2000, rng=random.Random(5))
    for _ in range(200):
        key = hdict.generate_key()
        assert KEY_MIN <= key <= KEY_MAX
        assert key not in hdict
        hdict.insert(key, hdict.generate_value())
    assert len(hdict) == 200


def test_generation_is_deterministic_with_seeded_rng():
    a = HybridDict(10, rng=random.Random(3))
    b = HybridDict(10_000, rng=random.Random(3))
    assert [a.generate_key() for _ in range(5)] == [b.generate_key() for _ in range(5)]
    assert a.generate_value() == b.generate_value()


def test_generate_key_skips_taken_keys():
    """A key already present is rejected and the next draw is used."""
    seq = random.Random(11)
    first = seq.randint(KEY_MIN, KEY_MAX)
    second = seq.randint(KEY_MIN, KEY_MAX)

    hdict = HybridDict(10, rng=random.Random(11))
    hdict.insert(first, "taken")
    assert hdict.generate_key() == second


def test_generate_value_format(hdict):
    first, last = hdict.generate_value().split(" ")
    assert first.isalpha() and last.isalpha()


@pytest.mark.parametrize("bad", ["12", 1.5, None, True])
def test_invalid_key_type(hdict, bad):
    with pytest.raises(TypeError):
        hdict.insert(bad, "x")
    with pytest.raises(TypeError):
        hdict.lookup(bad)


def test_key_out_of_64bit_range(hdict):
    with pytest.raises(ValueError):
        hdict.insert(1 << 63, "x")
    hdict.insert((1 << 63) - 1, "max")
    hdict.insert(-(1 << 63), "min")
    assert hdict.lookup(-(1 << 63)) == "min"


def test_invalid_value_type(hdict):
    with pytest.raises(TypeError):
        hdict.insert(1, b"bytes")


def test_invalid_threshold():
    with pytest.raises(TypeError):
        HybridDict("500")


def test_many_operations_match_dict(hdict):
    """Random workload agrees with a plain dict model."""
    rng = random.Random(2024)
    model = {}
    for _ in range(2000):
        key = rng.randint(0, 300)
        if rng.random() < 0.6:
            value = f"v{rng.randint(0, 9)}"
            hdict.insert(key, value)
            model.setdefault(key, value)
        else:
            assert hdict.delete(key) == (key if key in model else None)
            model.pop(key, None)
    assert len(hdict) == len(model)
    assert hdict.all_entries_sorted() == sorted(model.items())
    if hdict.kind is BackingKind.TREE:
        assert hdict._backing.is_balanced()
