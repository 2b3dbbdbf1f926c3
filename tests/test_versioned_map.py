import pytest

from distinctgrid.versioned_map import DEFAULT_SIZE, FastVersionedMap


def test_new_map_is_empty():
    store = FastVersionedMap(10)
    assert [k for k in range(10) if k in store] == []


def test_set_and_get():
    store = FastVersionedMap()
    store[5] = 42
    assert 5 in store
    assert store[5] == 42


def test_default_size():
    assert FastVersionedMap().size == DEFAULT_SIZE


def test_remove_drops_key():
    store = FastVersionedMap(10)
    store[5] = 42
    store.remove(5)
    assert 5 not in store
    with pytest.raises(KeyError):
        store[5]


def test_reset_clears_all_keys():
    store = FastVersionedMap(10)
    for key in range(10):
        store[key] = key * 2
    store.reset()
    assert all(key not in store for key in range(10))


def test_write_after_reset_is_visible():
    store = FastVersionedMap(10)
    store[3] = 7
    store.reset()
    store[3] = 9
    assert store[3] == 9
    assert 4 not in store


def test_remove_after_several_resets():
    store = FastVersionedMap(4)
    for _ in range(3):
        store.reset()
    store[2] = 1
    store.remove(2)
    assert 2 not in store


def test_missing_key_raises_key_error():
    store = FastVersionedMap(4)
    store[2] = 5
    with pytest.raises(KeyError) as excinfo:
        store[1]
    assert excinfo.type is KeyError
    assert 1 not in store
    assert store[2] == 5


@pytest.mark.parametrize("key", [-1, 4, 100])
def test_out_of_range_access(key):
    store = FastVersionedMap(4)
    assert key not in store
    with pytest.raises(IndexError):
        store[key] = 1
    with pytest.raises(IndexError):
        store[key]
    with pytest.raises(IndexError):
        store.remove(key)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FastVersionedMap(-1)