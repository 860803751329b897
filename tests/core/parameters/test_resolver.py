import pytest

from surveyview.core.parameters import Attributed, normalize_path, resolve_path


def test_normalize_path_wraps_single_key():
    assert normalize_path("sep") == ("sep",)
    assert normalize_path(2) == (2,)
    assert normalize_path(["data.grd", "z"]) == ("data.grd", "z")
    assert normalize_path(("a", 2)) == ("a", 2)


def test_normalize_path_rejects_bad_elements():
    with pytest.raises(TypeError):
        normalize_path(True)
    with pytest.raises(TypeError):
        normalize_path(["a", 1.5])
    with pytest.raises(TypeError):
        normalize_path(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        normalize_path([])


def test_resolve_by_name_stops_at_first_missing_key():
    data = {"a": {"b": {"c": 1}}}

    full = resolve_path(data, ("a", "b", "c"))
    assert full.depth == 3
    assert full.node == 1

    partial = resolve_path(data, ("a", "x", "c"))
    assert partial.depth == 1
    assert partial.keys == ("a",)
    assert partial.node == {"b": {"c": 1}}


def test_resolve_missing_head_returns_root():
    data = {"a": 1}

    resolved = resolve_path(data, ("zzz",))
    assert resolved.depth == 0
    assert resolved.node is data


def test_resolve_by_position_is_one_based():
    data = {"first": {"x": 10, "y": 20}, "second": 2}

    resolved = resolve_path(data, (1, 2))
    assert resolved.keys == ("first", "y")
    assert resolved.node == 20

    assert resolve_path(data, (3,)).depth == 0
    assert resolve_path(data, (0,)).depth == 0


def test_position_follows_current_insertion_order():
    data = {"a": 1, "b": 2}
    assert resolve_path(data, (2,)).node == 2

    del data["a"]
    data["c"] = 3
    assert resolve_path(data, (2,)).node == 3


def test_mixed_name_and_position_path():
    data = {"grid": {"x": [0, 1], "z": "surface"}}

    resolved = resolve_path(data, ("grid", 2))
    assert resolved.keys == ("grid", "z")
    assert resolved.node == "surface"


def test_resolve_does_not_descend_into_non_mapping():
    data = {"a": 5}

    resolved = resolve_path(data, ("a", "b"))
    assert resolved.depth == 1
    assert resolved.node == 5


def test_resolve_descends_through_attributed_mapping():
    data = {"a": Attributed(value={"b": 1}, attrs={"units": "m"})}

    resolved = resolve_path(data, ("a", "b"))
    assert resolved.depth == 2
    assert resolved.node == 1
