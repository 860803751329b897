from pathlib import Path

import pytest

from surveyview.core.palettes import grid_palette, point_palette
from surveyview.core.parameters import (
    DEFAULT_DIR,
    PROJECT_KEYS,
    WIN_LOC,
    DefaultValueError,
    FactoryDefault,
    LiteralDefault,
    ParameterStore,
    build_default_table,
    open_parameter_store,
    parameter_session,
)
from surveyview.core.parameters.defaults import coerce_default_table
from surveyview.core.runtime_config import RuntimeConfig


def _config(**overrides) -> RuntimeConfig:
    values = dict(
        config_path=None,
        default_dir=None,
        win_loc=None,
        max_dev_dim=(43, 56),
        sep="\t",
    )
    values.update(overrides)
    return RuntimeConfig(**values)


def test_default_table_contains_application_settings():
    table = build_default_table(_config())

    assert set(PROJECT_KEYS) <= set(table)
    assert table["sep"] == LiteralDefault("\t")
    assert table["cex.pts"] == LiteralDefault(1.0)
    assert table["useRaster"] == LiteralDefault(1)
    assert table["draw.key"] == LiteralDefault(0)
    assert table["crs"] == LiteralDefault(None)
    assert table["max.dev.dim"] == LiteralDefault((43, 56))
    assert isinstance(table[DEFAULT_DIR], FactoryDefault)


def test_palette_defaults_are_returned_as_functions():
    store = open_parameter_store(_config())

    assert store.get("palette.pts") is point_palette
    assert store.get("palette.grd") is grid_palette
    assert len(store.get("palette.pts")(4)) == 4


def test_default_dir_uses_working_directory_at_lookup_time(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    store = open_parameter_store(_config())

    monkeypatch.chdir(tmp_path)

    assert store.get(DEFAULT_DIR).resolve() == tmp_path.resolve()


def test_default_dir_prefers_configured_directory(tmp_path: Path):
    store = open_parameter_store(_config(default_dir=tmp_path / "projects"))

    assert store.get(DEFAULT_DIR) == tmp_path / "projects"


def test_config_values_flow_into_defaults():
    store = open_parameter_store(_config(win_loc=(100, 50), sep=",", max_dev_dim=(20, 30)))

    assert store.get(WIN_LOC) == (100, 50)
    assert store.get("sep") == ","
    assert store.get("max.dev.dim") == (20, 30)


def test_failing_factory_is_wrapped_and_chained():
    def broken() -> str:
        raise KeyError("HOME")

    store = ParameterStore(defaults={"home": FactoryDefault(broken)})

    with pytest.raises(DefaultValueError) as excinfo:
        store.get("home")

    assert excinfo.value.name == "home"
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_factory_may_read_the_same_store():
    store: ParameterStore

    def derived() -> str:
        return f"{store.get('base')}-derived"

    store = ParameterStore(defaults={"derived": FactoryDefault(derived)})
    store.set("base", "x")

    assert store.get("derived") == "x-derived"


def test_coerce_default_table_wraps_plain_values():
    table = coerce_default_table({"a": 1, "b": FactoryDefault(lambda: 2)})

    assert table["a"] == LiteralDefault(1)
    assert isinstance(table["b"], FactoryDefault)

    with pytest.raises(TypeError):
        coerce_default_table({1: "x"})  # type: ignore[dict-item]


def test_parameter_session_discards_data_on_exit():
    with parameter_session(_config()) as store:
        store.set("data.pts", {"x": [1.0]})
        assert store.get("data.pts") == {"x": [1.0]}

    assert store.snapshot() == {}
    assert store.get("sep") == "\t"


def test_parameter_session_discards_data_on_error():
    with pytest.raises(RuntimeError):
        with parameter_session(_config()) as store:
            store.set("scratch", 1)
            raise RuntimeError("boom")

    assert store.snapshot() == {}
