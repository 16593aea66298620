import pytest

from coranker.hashtable import HashTable


def test_insert_and_lookup():
    table = HashTable()
    table.insert("alpha", 1)
    table.insert("beta", 2)
    assert table["alpha"] == 1
    assert table.get("beta") == 2
    assert len(table) == 2


def test_insert_same_key_updates_value():
    table = HashTable()
    table.insert("key", "first")
    table.insert("key", "second")
    assert table["key"] == "second"
    assert len(table) == 1


def test_missing_key_behaviour():
    table = HashTable()
    assert table.get("nothing") is None
    assert table.get("nothing", "fallback") == "fallback"
    assert "nothing" not in table
    with pytest.raises(KeyError):
        table["nothing"]


def test_remove_present_and_absent():
    table = HashTable()
    table.insert("gone", 5)
    assert table.remove("gone") is True
    assert table.remove("gone") is False
    assert "gone" not in table
    assert len(table) == 0


def test_reinsert_after_remove():
    table = HashTable()
    table.insert("word", 1)
    table.remove("word")
    table.insert("word", 2)
    assert table["word"] == 2
    assert len(table) == 1


def test_growth_keeps_every_entry():
    table = HashTable()
    keys = [f"term{n}" for n in range(200)]
    for position, key in enumerate(keys):
        table.insert(key, position)
    assert len(table) == len(keys)
    assert table.capacity > 53
    assert all(table[key] == position for position, key in enumerate(keys))


def test_small_table_grows_instead_of_filling():
    table = HashTable(size=1)
    for key in ["a", "b", "c", "d"]:
        table.insert(key, key.upper())
    assert [table[key] for key in ["a", "b", "c", "d"]] == ["A", "B", "C", "D"]
    assert table.capacity >= len(table)


def test_lookup_past_tombstone():
    table = HashTable(size=1)
    for key in ["x", "y", "z"]:
        table.insert(key, key)
    table.remove("x")
    assert table["y"] == "y"
    assert table["z"] == "z"
    assert len(table) == 2


def test_non_ascii_keys():
    table = HashTable()
    table.insert("señal", 3)
    assert table["señal"] == 3


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(size)