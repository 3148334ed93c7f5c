import itertools
import string

import pytest

from countryguesser.dictionary import TABLE_SIZE, Dictionary, Entry, hash_key


def _colliding_keys(count):
    """Find ``count`` distinct two-letter keys sharing one bucket."""
    groups = {}
    for a, b in itertools.product(string.ascii_letters, repeat=2):
        key = a + b
        groups.setdefault(hash_key(key), []).append(key)
    for keys in groups.values():
        if len(keys) >= count:
            return keys[:count]
    raise AssertionError("no collision found")


@pytest.mark.parametrize("key", ["", "a", "France", "Israël", "Côte", "x" * 100])
def test_hash_key_in_range(key):
    assert 0 <= hash_key(key) < TABLE_SIZE


def test_hash_key_empty_and_single_char():
    assert hash_key("") == 0
    assert hash_key("a") == ord("a") % TABLE_SIZE


@pytest.mark.parametrize("key, expected", [("ab", 2), ("abc", 163)])
def test_hash_key_deterministic(key, expected):
    assert hash_key(key) == expected


def test_add_and_get_collects_values_in_order():
    d = Dictionary()
    d.add("France", "Europe")
    d.add("France", "Français")
    d.add("France", "67000000")
    entry = d.get("France")
    assert entry == Entry("France", ["Europe", "Français", "67000000"])
    assert len(d) == 1


def test_get_missing_returns_none():
    d = Dictionary()
    d.add("France", "Europe")
    assert d.get("Japon") is None
    assert "Japon" not in d
    assert "France" in d


def test_get_uses_bucket_of_given_key():
    d = Dictionary()
    d.add("France", "Europe")
    if hash_key("france") != hash_key("France"):
        assert d.get("france") is None
    assert d.get("France").key == "France"


def test_colliding_keys_are_chained():
    first, second, third = _colliding_keys(3)
    d = Dictionary()
    d.add(first, "1")
    d.add(second, "2")
    d.add(third, "3")
    d.add(second, "2b")
    assert len(d) == 3
    assert d.get(first).values == ["1"]
    assert d.get(second).values == ["2", "2b"]
    assert d.get(third).values == ["3"]
    assert d.keys() == [first, second, third]


def test_delete_removes_entry():
    d = Dictionary()
    d.add("France", "Europe")
    d.add("Japon", "Asie")
    d.delete("France")
    assert d.get("France") is None
    assert len(d) == 1
    assert d.keys() == ["Japon"]


def test_delete_missing_is_noop():
    d = Dictionary()
    d.add("France", "Europe")
    d.delete("Japon")
    assert len(d) == 1
    assert d.get("France").values == ["Europe"]


def test_delete_from_middle_of_chain():
    first, second, third = _colliding_keys(3)
    d = Dictionary()
    for key in (first, second, third):
        d.add(key, key)
    d.delete(second)
    assert d.keys() == [first, third]
    assert d.get(third).values == [third]


def test_keys_ordered_by_bucket():
    d = Dictionary()
    names = ["France", "Japon", "Chine", "Inde", "Perou"]
    for name in names:
        d.add(name, "x")
    keys = d.keys()
    assert sorted(keys) == sorted(names)
    buckets = [hash_key(k) for k in keys]
    assert buckets == sorted(buckets)
    assert list(d) == keys


def test_contains_rejects_non_strings():
    d = Dictionary()
    d.add("1", "x")
    assert 1 not in d