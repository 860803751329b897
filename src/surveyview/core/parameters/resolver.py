# どこで: `src/surveyview/core/parameters/resolver.py`。
# 何を: キーパスをストアの入れ子マッピング上で「解決できるところまで」辿る。
# なぜ: 「キーが丸ごと無い」と「親はあるが子が無い」を区別し、既定値フォールバックと set 可否の判定に使うため。

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .attributes import unwrap
from .key import Key, KeyPath

_NO_MATCH = object()


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """resolve_path の結果。

    Attributes
    ----------
    keys : tuple
        実際に辿った dict キー（位置指定は対応する実キーに置き換わる）。
    containers : tuple
        keys[i] が属するマッピング。
    node : Any
        最後に解決できた位置の値。1 段も解決できなければルート自身。
    """

    keys: tuple[Any, ...]
    containers: tuple[Mapping[Any, Any], ...]
    node: Any

    @property
    def depth(self) -> int:
        return len(self.keys)

    def is_full(self, path: KeyPath) -> bool:
        return self.depth == len(path)


def match_key(container: Mapping[Any, Any], item: Key) -> Any:
    """container 内で item に対応する実キーを返す。無ければ `_NO_MATCH`。

    str は名前の完全一致、int は現在の挿入順での 1 始まりの位置として扱う。
    """

    if isinstance(item, str):
        return item if item in container else _NO_MATCH
    if 1 <= item <= len(container):
        # 位置指定はその時点の順序に依存する（キーの追加・削除でずれる）
        for index, key in enumerate(container, start=1):
            if index == item:
                return key
    return _NO_MATCH


def resolve_path(root: Mapping[Any, Any], path: KeyPath) -> ResolvedPath:
    """path を root から辿り、解決できたところまでを返す。

    途中で解決に失敗したらそこで止まる（後戻りはしない）。マッピングでない値の下へは降りない。
    """

    keys: list[Any] = []
    containers: list[Mapping[Any, Any]] = []
    node: Any = root

    for item in path:
        container = unwrap(node)
        if not isinstance(container, Mapping):
            break
        key = match_key(container, item)
        if key is _NO_MATCH:
            break
        keys.append(key)
        containers.append(container)
        node = container[key]

    return ResolvedPath(keys=tuple(keys), containers=tuple(containers), node=node)


__all__ = ["ResolvedPath", "match_key", "resolve_path"]
