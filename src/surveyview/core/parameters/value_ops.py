# どこで: `src/surveyview/core/parameters/value_ops.py`。
# 何を: ストアの入れ子マッピングに対する問い合わせ / 代入 / 削除の手続きを提供する。
# なぜ: ロックや既定値テーブルを持つ ParameterStore 本体から、パス解決に依存する規則だけを切り出すため。

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

from .attributes import as_mutable_mapping, attributes_of, unwrap, with_attribute
from .defaults import DefaultEntry
from .key import KeyPath, format_path
from .resolver import resolve_path

_logger = logging.getLogger(__name__)


class SetResult(Enum):
    """assign_value の結果。"""

    REPLACED = "replaced"  # 既存の位置を上書きした
    CREATED = "created"  # 親の下に新しいエントリを作った
    IGNORED = "ignored"  # 解決できないパスなので何もしなかった


def query_value(
    data: Mapping[Any, Any],
    defaults: Mapping[str, DefaultEntry],
    path: KeyPath,
) -> Any:
    """path の値を返す。

    完全に解決できなければ、長さ 1 の名前パスに限り既定値へフォールバックする。
    それ以外は None。
    """

    resolved = resolve_path(data, path)
    if not resolved.is_full(path):
        head = path[0]
        if len(path) == 1 and isinstance(head, str) and head in defaults:
            return defaults[head].resolve(head)
        return None
    return unwrap(resolved.node)


def query_attribute(data: Mapping[Any, Any], path: KeyPath, name: str) -> Any:
    """path の値に付いた name 属性を返す。値か属性が無ければ None。既定値は見ない。"""

    resolved = resolve_path(data, path)
    if not resolved.is_full(path):
        return None
    return attributes_of(resolved.node).get(str(name))


def assign_value(
    data: MutableMapping[Any, Any],
    path: KeyPath,
    value: Any,
    *,
    attr: str | None = None,
) -> SetResult:
    """path へ value（attr 指定時はその属性）を書き込む。

    書き込めるのは次の 2 通りだけ:

    - パス全体が解決できる: 最後の要素をその親マッピング内で上書きする。
    - 1 要素だけ足りず、解決済みの親（無ければ data）がマッピング: 新しいエントリを作る。

    それ以外は何もせず `SetResult.IGNORED` を返す。次の場合も新規作成とはみなさず無視する:

    - 末尾を超える位置指定の整数が、親に別位置のキーとして既にある（既存エントリを潰さない）。
    - 無いエントリの属性を None（= 削除）にしようとした。
    """

    resolved = resolve_path(data, path)

    if resolved.is_full(path) and isinstance(resolved.containers[-1], MutableMapping):
        container = resolved.containers[-1]
        key = resolved.keys[-1]
        if attr is None:
            # 値の差し替えは属性ごと置き換える
            container[key] = value
        else:
            container[key] = with_attribute(container[key], attr, value)
        return SetResult.REPLACED

    elif resolved.depth == len(path) - 1:
        parent = as_mutable_mapping(resolved.node)
        new_key = path[-1]
        creatable = isinstance(new_key, str) or (new_key >= 1 and parent is not None and new_key not in parent)
        removes_attr = attr is not None and value is None
        if parent is not None and creatable and not removes_attr:
            # 末尾を超える位置指定は、その整数自体をキーとして追加する
            parent[new_key] = value if attr is None else with_attribute(None, attr, value)
            return SetResult.CREATED

    _logger.debug(
        "解決できない key path への set を無視します: path=%s resolved=%d/%d",
        format_path(path),
        resolved.depth,
        len(path),
    )
    return SetResult.IGNORED


def remove_value(data: MutableMapping[Any, Any], path: KeyPath) -> bool:
    """path が完全に解決できればそのエントリを削除して True を返す。"""

    resolved = resolve_path(data, path)
    if not resolved.is_full(path):
        return False
    container = resolved.containers[-1]
    if not isinstance(container, MutableMapping):
        return False
    del container[resolved.keys[-1]]
    return True


__all__ = ["SetResult", "query_value", "query_attribute", "assign_value", "remove_value"]
