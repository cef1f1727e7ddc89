from __future__ import annotations

import pytest

from configstore.domain.exceptions import UnsupportedOperationError
from configstore.domain.property_store import PropertyStore, UnmodifiableList


def test_get_unknown_key_returns_none() -> None:
    store = PropertyStore()
    assert store.get("missing") is None
    assert "missing" not in store


def test_set_then_get_roundtrip_and_overwrite() -> None:
    store = PropertyStore()
    store.set("colour", "blue")
    store.set("colour", "red")
    assert store.get("colour") == "red"
    assert len(store) == 1


def test_set_none_deletes_and_is_idempotent() -> None:
    store = PropertyStore({"a": "1"})
    store.set("a", None)
    store.set("a", None)
    store.delete("never-set")
    assert store.get("a") is None
    assert len(store) == 0


def test_empty_string_is_a_value_not_absence() -> None:
    store = PropertyStore()
    store.set("k", "")
    assert store.get("k") == ""
    assert "k" in store


def test_replace_all_keeps_the_same_backing_dict() -> None:
    store = PropertyStore({"old": "x"})
    live = store.as_mutable_mapping()

    store.replace_all([("a", "1"), ("b", "2")])

    assert live == {"a": "1", "b": "2"}
    assert store.as_mutable_mapping() is live


def test_keys_is_a_snapshot() -> None:
    store = PropertyStore({"a": "1"})
    keys = store.keys()
    keys.append("b")
    assert store.keys() == ["a"]


def test_unmodifiable_list_reads_like_a_list() -> None:
    view = UnmodifiableList(["a", "b"])
    assert isinstance(view, list)
    assert view == ["a", "b"]
    assert view[1] == "b"
    assert list(view) + ["c"] == ["a", "b", "c"]


@pytest.mark.parametrize(
    "mutate",
    [
        lambda v: v.append("x"),
        lambda v: v.extend(["x"]),
        lambda v: v.insert(0, "x"),
        lambda v: v.remove("a"),
        lambda v: v.pop(),
        lambda v: v.clear(),
        lambda v: v.sort(),
        lambda v: v.reverse(),
        lambda v: v.__setitem__(0, "x"),
        lambda v: v.__delitem__(0),
        lambda v: v.__iadd__(["x"]),
        lambda v: v.__imul__(2),
    ],
)
def test_unmodifiable_list_rejects_every_mutation(mutate) -> None:
    view = UnmodifiableList(["a", "b"])
    with pytest.raises(UnsupportedOperationError):
        mutate(view)
    assert view == ["a", "b"]


def test_unsupported_operation_is_a_type_error() -> None:
    view = UnmodifiableList([])
    with pytest.raises(TypeError):
        view += ["x"]
