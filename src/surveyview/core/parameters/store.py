# どこで: `src/surveyview/core/parameters/store.py`。
# 何を: ParameterStore（セッション単位の階層パラメータストア）を定義する。
# なぜ: GUI・インポート・描画の各モジュールが、設定値とキャッシュしたデータセットを同じ入口で読み書きできるようにするため。

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .defaults import DefaultEntry, coerce_default_table
from .errors import InvalidPathError
from .key import Key, normalize_path
from .resolver import resolve_path
from .snapshot_ops import clear_data_in_place, prepare_replacement, take_snapshot
from .value_ops import SetResult, assign_value, query_attribute, query_value, remove_value

_UNSET: Any = object()


class ParameterStore:
    """キーパスで値を読み書きする階層ストア。

    Notes
    -----
    - 値はトップレベルから入れ子の dict で保持する。キーパスの str 要素は名前、int 要素は
      その時点の挿入順での 1 始まりの位置を表す。キーの追加・削除で位置はずれる。
    - 長さ 1 の名前パスが未設定なら、既定値テーブルの値を返す。
    - 解決できないパスへの set は既定では黙って無視する（`strict=True` で例外にできる）。
    - 末尾を超える位置指定の set はその整数をキーとして追加する。同じ整数が別位置のキーとして
      既にあれば上書きせず無視する。無いエントリの属性を None にする set も無視する。
    - すべての操作は 1 つの再入可能ロックで直列化する。既定値ファクトリが同じスレッドから
      ストアを読み直しても詰まらない。
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[Any, Any] = {}
        self._defaults: dict[str, DefaultEntry] = coerce_default_table(defaults or {})

    # --- 問い合わせ ---
    def get(self, path: Key | Sequence[Key]) -> Any:
        """path の値を返す。未設定なら既定値（長さ 1 の名前パスのみ）か None。"""

        keys = normalize_path(path)
        with self._lock:
            return query_value(self._data, self._defaults, keys)

    def get_attr(self, path: Key | Sequence[Key], name: str) -> Any:
        """path の値に付いた name 属性を返す。未設定なら None。"""

        keys = normalize_path(path)
        with self._lock:
            return query_attribute(self._data, keys, name)

    def __contains__(self, path: object) -> bool:
        try:
            keys = normalize_path(path)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        with self._lock:
            return resolve_path(self._data, keys).is_full(keys)

    @property
    def defaults(self) -> Mapping[str, DefaultEntry]:
        """既定値テーブルの読み取り専用ビュー。"""

        return MappingProxyType(self._defaults)

    def default_value(self, name: str) -> Any:
        """name の既定値を返す（ファクトリは引数なしで呼ぶ）。未登録なら None。"""

        entry = self._defaults.get(str(name))
        if entry is None:
            return None
        with self._lock:
            return entry.resolve(str(name))

    # --- 変更 ---
    def set(
        self,
        path: Key | Sequence[Key],
        value: Any,
        *,
        attr: str | None = None,
        strict: bool = False,
    ) -> SetResult:
        """path に value（attr 指定時はその属性）を書き込む。

        Parameters
        ----------
        path : str | int | Sequence[str | int]
            書き込み先。既存の位置か、既存の親の直下の新しいキーである必要がある。
        value : Any
            書き込む値。attr 指定時に None を渡すとその属性を削除する。
        attr : str | None
            属性名。None なら値そのものを置き換える（既存の属性も消える）。
        strict : bool
            True なら、書き込めないパスで InvalidPathError を送出する。

        Returns
        -------
        SetResult
            REPLACED / CREATED / IGNORED。
        """

        keys = normalize_path(path)
        with self._lock:
            result = assign_value(self._data, keys, value, attr=attr)
            if result is SetResult.IGNORED and strict:
                raise InvalidPathError(keys, resolve_path(self._data, keys).depth)
            return result

    def remove(self, path: Key | Sequence[Key]) -> bool:
        """path のエントリを削除する。削除できたら True。"""

        keys = normalize_path(path)
        with self._lock:
            return remove_value(self._data, keys)

    # --- 一括操作 ---
    def snapshot(self) -> dict[Any, Any]:
        """現在の内容のディープコピーを返す（restore_all でそのまま戻せる）。"""

        with self._lock:
            return take_snapshot(self._data)

    def restore_all(self, replacement: Mapping[Any, Any]) -> None:
        """内容を replacement で丸ごと置き換える。`{}` を渡すと全消去。"""

        data = prepare_replacement(replacement)
        with self._lock:
            self._data = data

    def clear(self, *, data: bool = False, project: bool = False) -> None:
        """選択的にクリアする。

        - data=True: 既定値テーブルにあるキーだけを残す（読み込んだデータセットを捨てる）。
        - project=True: `win.loc` と `default.dir` だけを残す。
        """

        with self._lock:
            clear_data_in_place(
                self._data,
                defaults=self._defaults.keys(),
                clear_data=data,
                clear_project=project,
            )

    # --- 単一入口 ---
    def __call__(
        self,
        path: Key | Sequence[Key] | None = None,
        value: Any = _UNSET,
        *,
        attr: str | None = None,
        clear_project: bool = False,
        clear_data: bool = False,
        replace_all: Mapping[Any, Any] | None = None,
    ) -> Any:
        """引数の組み合わせで問い合わせ / 変更 / 一括操作を切り替える入口。

        優先順:
        1) clear_data / clear_project: 選択的クリア（他の引数は見ない）
        2) replace_all: 丸ごと置換
        3) path なし: スナップショット
        4) value なし: 値（attr 指定時は属性）の問い合わせ
        5) それ以外: 値（attr 指定時は属性）の書き込み

        変更系の呼び出しは None を返す。
        """

        if clear_data or clear_project:
            self.clear(data=clear_data, project=clear_project)
            return None
        if replace_all is not None:
            self.restore_all(replace_all)
            return None
        if path is None:
            return self.snapshot()
        if value is _UNSET:
            if attr is None:
                return self.get(path)
            return self.get_attr(path, attr)
        self.set(path, value, attr=attr)
        return None

    def __repr__(self) -> str:
        with self._lock:
            keys = list(self._data)
        return f"ParameterStore(keys={keys!r}, defaults={len(self._defaults)})"


__all__ = ["ParameterStore"]
