# どこで: `src/surveyview/core/parameters/attributes.py`。
# 何を: 値に名前付き属性（メタ情報）を添える薄いラッパを定義する。
# なぜ: 値そのもの（dict や DataFrame など）を書き換えずに、列名・単位などの付帯情報を持たせるため。

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Attributed:
    """属性付きの値。

    Notes
    -----
    - `value` が本体、`attrs` が属性のサイドテーブル。
    - パス解決はこのラッパを透過的に通過する（`value` がマッピングならその中へ降りる）。
    - 属性が空になったラッパは `strip_empty()` で素の値へ戻す。
    """

    value: Any = None
    attrs: dict[str, Any] = field(default_factory=dict)


def unwrap(node: Any) -> Any:
    """Attributed なら中身を、そうでなければ node をそのまま返す。"""

    return node.value if isinstance(node, Attributed) else node


def attributes_of(node: Any) -> Mapping[str, Any]:
    """node の属性テーブルを返す（属性が無ければ空 dict）。"""

    return node.attrs if isinstance(node, Attributed) else {}


def as_mutable_mapping(node: Any) -> MutableMapping[Any, Any] | None:
    """node が子を持てるマッピングならそれを返す。そうでなければ None。"""

    inner = unwrap(node)
    if isinstance(inner, MutableMapping):
        return inner
    return None


def with_attribute(node: Any, name: str, value: Any) -> Any:
    """name 属性を value に差し替えた新しいノードを返す。

    value が None の場合は属性を削除する。他の属性は保持する。
    """

    attrs = dict(attributes_of(node))
    if value is None:
        attrs.pop(name, None)
    else:
        attrs[str(name)] = value
    return strip_empty(Attributed(value=unwrap(node), attrs=attrs))


def strip_empty(node: Any) -> Any:
    """属性を持たない Attributed を素の値へ戻す。"""

    if isinstance(node, Attributed) and not node.attrs:
        return node.value
    return node


__all__ = [
    "Attributed",
    "unwrap",
    "attributes_of",
    "as_mutable_mapping",
    "with_attribute",
    "strip_empty",
]
