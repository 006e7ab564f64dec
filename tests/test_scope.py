import pytest

from propbag import PropertyBag, PropertyBagKey, PropertyBagScope

CULTURE = PropertyBagKey(str, "culture")


def test_scope_sets_value_and_exposes_bag_and_key() -> None:
    bag = PropertyBag()
    scope = bag.scope(CULTURE, "fr-FR")
    assert isinstance(scope, PropertyBagScope)
    assert scope.bag is bag
    assert scope.key == CULTURE
    assert not scope.released
    assert bag.try_get(CULTURE) == (True, "fr-FR")


def test_release_removes_key_that_was_absent() -> None:
    bag = PropertyBag()
    with bag.scope(CULTURE, "a"):
        assert bag.try_get(CULTURE) == (True, "a")
    assert bag.try_get(CULTURE) == (False, None)
    assert CULTURE not in bag


def test_release_restores_previous_value() -> None:
    bag = PropertyBag().set(CULTURE, "en-US")
    with bag.scope(CULTURE, "fr-FR"):
        assert bag.try_get(CULTURE) == (True, "fr-FR")
    assert bag.try_get(CULTURE) == (True, "en-US")


def test_release_restores_previous_none_value() -> None:
    key = PropertyBagKey(type(None), "marker")
    bag = PropertyBag().set(key, None)
    with bag.scope(key, None):
        pass
    assert bag.try_get(key) == (True, None)


def test_release_is_idempotent() -> None:
    bag = PropertyBag().set(CULTURE, "en-US")
    scope = bag.scope(CULTURE, "fr-FR")
    scope.release()
    assert scope.released
    # a later change must not be undone by a second release
    bag.set(CULTURE, "de-DE")
    scope.release()
    scope.close()
    assert bag.try_get(CULTURE) == (True, "de-DE")


def test_release_after_key_removed_elsewhere_does_not_raise() -> None:
    bag = PropertyBag()
    scope = bag.scope(CULTURE, "fr-FR")
    bag.remove(CULTURE)
    scope.release()
    assert CULTURE not in bag


def test_release_runs_when_block_raises() -> None:
    bag = PropertyBag().set(CULTURE, "en-US")
    with pytest.raises(RuntimeError):
        with bag.scope(CULTURE, "fr-FR"):
            raise RuntimeError("force exit")
    assert bag.try_get(CULTURE) == (True, "en-US")


def test_nested_scopes_unwind_in_order() -> None:
    counter = PropertyBagKey(int, "counter")
    bag = PropertyBag().set(counter, 1)

    with bag.scope(counter, 2):
        assert bag.get_value(counter) == 2
        with bag.scope(counter, 3):
            assert bag.get_value(counter) == 3
        assert bag.get_value(counter) == 2

    assert bag.get_value(counter) == 1


def test_scope_only_touches_its_own_key() -> None:
    str_value = PropertyBagKey(str, "value")
    int_value = PropertyBagKey(int, "value")
    bag = PropertyBag().set(int_value, 42)

    with bag.scope(str_value, "s"):
        assert bag.try_get(int_value) == (True, 42)

    assert str_value not in bag
    assert bag.try_get(int_value) == (True, 42)


def test_scope_constructed_directly_removes_on_release() -> None:
    bag = PropertyBag().set(CULTURE, "en-US")
    with PropertyBagScope(bag, CULTURE):
        assert bag.try_get(CULTURE) == (True, "en-US")
    assert CULTURE not in bag


def test_repr_shows_state() -> None:
    scope = PropertyBag().scope(CULTURE, "x")
    assert "active" in repr(scope)
    scope.release()
    assert "released" in repr(scope)


def test_out_of_order_release_keeps_outer_value() -> None:
    bag = PropertyBag()
    outer = bag.scope(CULTURE, "a")
    inner = bag.scope(CULTURE, "b")
    outer.release()
    assert CULTURE not in bag
    inner.release()
    assert bag.try_get(CULTURE) == (True, "a")
