import io

import pytest

from securedtable.hashtable import HashedData, HashTable, hash_key


def _table(size):
    return HashTable(hash_key, size)


def test_delete_one_value():
    ht = _table(2)
    ht.insert("key", "value")
    ht.delete("key")
    assert ht.search("key") is None
    assert ht.is_empty()


def test_delete_non_present_value():
    ht = _table(2)
    ht.insert("key", "value")
    with pytest.raises(KeyError):
        ht.delete("whatever")
    assert ht.search("key") == "value"


def test_search_one_value():
    ht = _table(12)
    ht.insert("key", "value")
    assert ht.search("key") == "value"


def test_search_non_present_value():
    ht = _table(12)
    ht.insert("key", "value")
    assert ht.search("whatever") is None


def test_empty_after_insert_and_delete():
    ht = _table(8)
    ht.insert("key", "value")
    ht.delete("key")
    assert ht.is_empty() is True


def test_not_empty_after_insert():
    ht = _table(8)
    ht.insert("key", "value")
    assert ht.is_empty() is False


def test_new_table_is_empty():
    assert _table(4).is_empty() is True


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(hash_key, size)


def test_search_normal():
    ht = _table(6)
    ht.insert("quzifuizehgfuizs", "value")
    assert ht.search("quzifuizehgfuizs") == "value"


def test_collision_inserts():
    ht = _table(3)
    ht.insert("uiheguihziughiu", "value")
    ht.insert("uihegujhziughiu", "value")
    ht.insert("uihegujhziughiu", "value")
    assert ht.search("uiheguihziughiu") == "value"
    assert ht.search("uihegujhziughiu") == "value"
    assert sum(len(bucket) for bucket in ht.buckets) == 2


def test_insert_none_key_rejected():
    ht = _table(5)
    with pytest.raises(TypeError):
        ht.insert(None, "Value")
    assert ht.is_empty()


def test_delete_none_key_rejected():
    ht = _table(5)
    with pytest.raises(TypeError):
        ht.delete(None)


def test_dump_output():
    ht = _table(3)
    ht.insert("uiheguihziughiu", "value")
    out = io.StringIO()
    ht.dump(out)
    assert out.getvalue() == "[0]:\n> 2110624758 - value\n[1]:\n[2]:\n"


def test_dump_empty_table():
    out = io.StringIO()
    _table(2).dump(out)
    assert out.getvalue() == "[0]:\n[1]:\n"


def test_hash_key_pinned_value():
    assert hash_key("uiheguihziughiu", 3) == 2110624758


def test_hash_key_depends_on_size_modulo_eight():
    assert hash_key("some key", 3) == hash_key("some key", 11)


def test_hash_key_non_negative_and_stable():
    for word in ["a", "b", "key", "another key"]:
        value = hash_key(word, 5)
        assert 0 <= value <= 2**31
        assert value == hash_key(word, 5)


def test_insert_replaces_value():
    ht = _table(4)
    ht.insert("key", "first")
    ht.insert("key", "second")
    assert ht.search("key") == "second"
    assert sum(len(bucket) for bucket in ht.buckets) == 1


def test_entries_stored_as_hashed_data():
    ht = _table(4)
    ht.insert("key", "value")
    entries = [entry for bucket in ht.buckets for entry in bucket]
    assert entries == [HashedData(hash_key("key", 4), "value")]


def test_custom_hash_function_used():
    ht = HashTable(lambda key, size: 7, 4)
    ht.insert("a", "one")
    assert ht.buckets[3].head is not None
    assert ht.search("a") == "one"
    ht.insert("b", "two")
    assert ht.search("a") == "two"


def test_clear_empties_table():
    ht = _table(4)
    ht.insert("x", "1")
    ht.insert("y", "2")
    ht.clear()
    assert ht.is_empty()
    assert ht.search("x") is None