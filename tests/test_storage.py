from propbag import MemoryStorage, PropertyBagKey, StorageProtocol

KEY = PropertyBagKey(int, "k")


def test_memory_storage_satisfies_protocol() -> None:
    assert isinstance(MemoryStorage(), StorageProtocol)


def test_get_distinguishes_none_from_missing() -> None:
    store = MemoryStorage()
    assert store.get(KEY) == (False, None)
    store.set(KEY, None)
    assert store.get(KEY) == (True, None)
    assert KEY in store


def test_delete_missing_key_is_noop() -> None:
    store = MemoryStorage()
    store.delete(KEY)
    store.set(KEY, 1)
    store.delete(KEY)
    assert len(store) == 0


def test_to_dict_and_update() -> None:
    store = MemoryStorage()
    store.update({KEY: 1})
    d = store.to_dict()
    assert d == {KEY: 1}
    d.clear()
    assert list(store.keys()) == [KEY]
    assert len(store) == 1
