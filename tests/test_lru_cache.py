import pytest

from collisionbench.lru_cache import LruCache


def test_insert_and_get():
    cache = LruCache(3)
    cache.insert("a", 1)
    assert cache.get("a") == 1
    assert "a" in cache
    assert len(cache) == 1


def test_missing_key_returns_none():
    cache = LruCache(2)
    assert cache.get("nope") is None
    assert "nope" not in cache


def test_evicts_least_recently_inserted():
    cache = LruCache(2)
    cache.insert("a", 1)
    cache.insert("b", 2)
    cache.insert("c", 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache
    assert len(cache) == 2


def test_get_refreshes_entry():
    cache = LruCache(2)
    cache.insert("a", 1)
    cache.insert("b", 2)
    assert cache.get("a") == 1
    cache.insert("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 1


def test_contains_does_not_refresh():
    cache = LruCache(2)
    cache.insert("a", 1)
    cache.insert("b", 2)
    assert "a" in cache
    cache.insert("c", 3)
    assert "a" not in cache


def test_full_cache_evicts_even_when_overwriting():
    cache = LruCache(2)
    cache.insert("a", 1)
    cache.insert("b", 2)
    cache.insert("b", 20)
    assert "a" not in cache
    assert cache.get("b") == 20
    assert len(cache) == 1


def test_size_never_exceeds_capacity():
    cache = LruCache(4)
    for i in range(50):
        cache.insert(i, i * i)
        assert len(cache) <= 4
    assert cache.get(49) == 49 * 49


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LruCache(-1)