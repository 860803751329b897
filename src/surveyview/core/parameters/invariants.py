# どこで: `src/surveyview/core/parameters/invariants.py`。
# 何を: ParameterStore の不変条件をテストで検証する関数を提供する。
# なぜ: ops に分割した規則の整合性を 1 箇所で確かめ、踏み抜きを早期検知するため。

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .attributes import Attributed
from .defaults import FactoryDefault, LiteralDefault
from .store import ParameterStore


def _check_node(node: Any) -> None:
    if isinstance(node, Attributed):
        # 空の属性テーブルは素の値へ戻しておく約束
        assert node.attrs
        for name, value in node.attrs.items():
            assert isinstance(name, str)
            # None を代入した属性は削除されている
            assert value is not None
        assert not isinstance(node.value, Attributed)
        node = node.value
    if isinstance(node, Mapping):
        for key, child in node.items():
            assert isinstance(key, (str, int)) and not isinstance(key, bool)
            _check_node(child)


def assert_invariants(store: ParameterStore) -> None:
    """ParameterStore の不変条件を検査する。

    Notes
    -----
    テスト専用の検査関数。実行時に常時呼ぶことは想定しない。
    """

    for name, entry in store.defaults.items():
        assert isinstance(name, str)
        assert isinstance(entry, (LiteralDefault, FactoryDefault))

    data = store._data
    assert isinstance(data, dict)
    _check_node(data)

    # snapshot は内部状態と独立している
    snapshot = store.snapshot()
    assert snapshot is not data
    assert list(snapshot) == list(data)


__all__ = ["assert_invariants"]
