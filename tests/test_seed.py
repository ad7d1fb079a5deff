"""Tests for seeding from key files and the command-line front-end."""
import random

import pytest

from pyhybrid import HybridDict
from pyhybrid.cli import main
from pyhybrid.seed import load_keys, seed


@pytest.fixture
def keyfile(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("40000000\n10000000 30000000\n\n20000000\n")
    return path


def test_load_keys(keyfile):
    assert list(load_keys(keyfile)) == [40000000, 10000000, 30000000, 20000000]


def test_load_keys_limit(keyfile):
    assert list(load_keys(keyfile, limit=2)) == [40000000, 10000000]
    assert list(load_keys(keyfile, limit=0)) == []


def test_load_keys_rejects_garbage(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("123\nabc\n")
    with pytest.raises(ValueError, match="bad.txt:2"):
        list(load_keys(path))


def test_load_keys_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(load_keys(tmp_path / "nope.txt"))


@pytest.mark.parametrize("threshold", [10, 1000])
def test_seed_inserts_with_generated_values(keyfile, threshold):
    hdict = HybridDict(threshold, rng=random.Random(0))
    assert seed(hdict, keyfile) == 4
    assert [k for k, _ in hdict.all_entries_sorted()] == [10000000, 20000000, 30000000, 40000000]
    assert all(" " in v for _, v in hdict.all_entries_sorted())


def test_cli_list(keyfile, capsys):
    assert main(["--threshold", "1000", "--file", str(keyfile), "--seed", "1", "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(" -- ")[0] for line in lines] == ["10000000", "20000000", "30000000", "40000000"]


def test_cli_limit_follows_threshold(keyfile, capsys):
    assert main(["--threshold", "2", "--file", str(keyfile), "list"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_cli_get_and_missing(keyfile, capsys):
    assert main(["--threshold", "1000", "--file", str(keyfile), "add", "55555555", "Eva Gill"]) == 0
    assert "55555555 -- Eva Gill" in capsys.readouterr().out
    assert main(["--threshold", "1000", "--file", str(keyfile), "get", "12"]) == 1
    assert "not found" in capsys.readouterr().err


def test_cli_range(keyfile, capsys):
    assert main(["--threshold", "1000", "--file", str(keyfile), "range", "10000000", "40000000"]) == 0
    assert capsys.readouterr().out.strip() == "2"
    assert main(["--threshold", "10", "--file", str(keyfile), "range", "1", "40000000"]) == 1


def test_cli_generate(capsys):
    assert main(["--threshold", "10", "--seed", "4", "generate"]) == 0
    key = int(capsys.readouterr().out)
    assert 10_000_000 <= key <= 99_999_999


def test_cli_bad_seed_file(tmp_path):
    assert main(["--threshold", "10", "--file", str(tmp_path / "missing.txt"), "list"]) == 2
