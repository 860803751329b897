# どこで: `src/surveyview/core/parameters/key.py`。
# 何を: キーパス（名前 / 1 始まりの位置の列）の型と正規化を定義する。
# なぜ: 呼び出し側が `"sep"` / `("data.grd", "z")` / `(2, 1)` を区別なく渡せるようにするため。

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

Key: TypeAlias = str | int
KeyPath: TypeAlias = tuple[Key, ...]


def _check_key(item: object) -> Key:
    # bool は int のサブクラスだが、位置指定として扱うと事故の元なので拒否する。
    if isinstance(item, bool) or not isinstance(item, (str, int)):
        raise TypeError(f"key path の要素は str か int である必要があります: got={item!r}")
    return item


def normalize_path(path: Key | Sequence[Key]) -> KeyPath:
    """キーパスを tuple に正規化して返す。

    Parameters
    ----------
    path : str | int | Sequence[str | int]
        単一キー、またはキーの列。単一キーは長さ 1 のパスとして扱う。

    Returns
    -------
    tuple[str | int, ...]
        正規化済みのキーパス。

    Raises
    ------
    TypeError
        要素が str / int 以外の場合。
    ValueError
        空のパスが渡された場合。

    Notes
    -----
    str と int の混在は許す。int 要素は、直前の要素が解決したマッピング内の位置として解釈する。
    """

    if isinstance(path, (str, int)) and not isinstance(path, bool):
        return (path,)
    if isinstance(path, (bool, bytes, bytearray)) or not isinstance(path, Sequence):
        raise TypeError(f"key path は str / int かその列である必要があります: got={path!r}")

    keys = tuple(_check_key(item) for item in path)
    if not keys:
        raise ValueError("key path が空です")
    return keys


def format_path(path: KeyPath) -> str:
    """ログ/例外メッセージ用にキーパスを文字列化する。"""

    return "/".join(str(k) if isinstance(k, int) else repr(k) for k in path)


__all__ = ["Key", "KeyPath", "normalize_path", "format_path"]
