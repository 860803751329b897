# どこで: `src/surveyview/core/parameters/snapshot_ops.py`。
# 何を: ストア全体のスナップショット取得 / 丸ごと置換 / 選択的クリアを提供する。
# なぜ: セッションの保存・復元と、データセット破棄・プロジェクト初期化の規則を 1 箇所にまとめるため。

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from .defaults import PROJECT_KEYS

_logger = logging.getLogger(__name__)


def take_snapshot(data: Mapping[Any, Any]) -> dict[Any, Any]:
    """data のディープコピーを返す（以後の変更はスナップショットに波及しない）。"""

    return copy.deepcopy(dict(data))


def prepare_replacement(replacement: Mapping[Any, Any]) -> dict[Any, Any]:
    """replacement から新しいストア内容を作って返す（空マッピングなら全消去）。"""

    if not isinstance(replacement, Mapping):
        raise TypeError(f"replace_all には mapping を渡してください: got={type(replacement).__name__}")
    return copy.deepcopy(dict(replacement))


def retain_keys(data: MutableMapping[Any, Any], keep: Iterable[Any]) -> list[Any]:
    """keep に含まれないトップレベルキーを data からその場で削除し、削除したキーを返す。

    keep にあって data に無いキーは単に無視する。
    """

    keep_set = set(keep)
    removed = [key for key in data if key not in keep_set]
    for key in removed:
        del data[key]
    return removed


def clear_keys_for(
    *,
    defaults: Iterable[str],
    clear_data: bool,
    clear_project: bool,
) -> tuple[str, ...] | None:
    """クリア時に残すトップレベルキーを返す。どちらのフラグも偽なら None。

    - clear_data: 既定値テーブルにあるキー（= アプリ設定）だけを残し、データセットを捨てる。
    - clear_project: ウィンドウ位置と既定ディレクトリだけを残す。
    """

    if clear_data:
        return tuple(defaults)
    if clear_project:
        return PROJECT_KEYS
    return None


def clear_data_in_place(
    data: MutableMapping[Any, Any],
    *,
    defaults: Iterable[str],
    clear_data: bool = False,
    clear_project: bool = False,
) -> list[Any]:
    """選択的クリアを実行し、削除したキーを返す。"""

    keep = clear_keys_for(defaults=defaults, clear_data=clear_data, clear_project=clear_project)
    if keep is None:
        return []
    removed = retain_keys(data, keep)
    _logger.debug(
        "ストアをクリアしました: mode=%s removed=%d kept=%d",
        "data" if clear_data else "project",
        len(removed),
        len(data),
    )
    return removed


__all__ = [
    "take_snapshot",
    "prepare_replacement",
    "retain_keys",
    "clear_keys_for",
    "clear_data_in_place",
]
