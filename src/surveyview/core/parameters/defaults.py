# どこで: `src/surveyview/core/parameters/defaults.py`。
# 何を: トップレベルキーの既定値テーブル（リテラル / ファクトリ）を定義する。
# なぜ: 未設定の設定値を問い合わせたときに、実行時設定を反映した既定値を返すため。

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

from surveyview.core.palettes import grid_palette, point_palette
from surveyview.core.runtime_config import RuntimeConfig

from .errors import DefaultValueError

# GUI 配置など、プロジェクトを切り替えても残す設定
WIN_LOC = "win.loc"
DEFAULT_DIR = "default.dir"
PROJECT_KEYS: tuple[str, ...] = (WIN_LOC, DEFAULT_DIR)

# 外部モジュールが計算結果を置く既知のキー（既定値は持たない）
DATA_RAW = "data.raw"
DATA_PTS = "data.pts"
DATA_GRD = "data.grd"
VERSION = "ver"


@dataclass(frozen=True, slots=True)
class LiteralDefault:
    """そのまま返す既定値。callable でも呼び出さない（パレット関数など）。"""

    value: Any

    def resolve(self, name: str) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class FactoryDefault:
    """問い合わせのたびに引数なしで呼び出して値を得る既定値（キャッシュしない）。"""

    factory: Callable[[], Any]

    def resolve(self, name: str) -> Any:
        try:
            return self.factory()
        except Exception as exc:
            raise DefaultValueError(name) from exc


DefaultEntry: TypeAlias = LiteralDefault | FactoryDefault


def _default_dir_factory(config: RuntimeConfig) -> Callable[[], Path]:
    configured = config.default_dir

    def _factory() -> Path:
        if configured is not None:
            return configured
        return Path(os.getcwd())

    return _factory


def build_default_table(config: RuntimeConfig) -> dict[str, DefaultEntry]:
    """実行時設定から既定値テーブルを組み立てて返す。

    Notes
    -----
    キーの並びは clear(data=True) 後のキー集合を決めるだけで、意味は持たない。
    """

    table: dict[str, DefaultEntry] = {
        WIN_LOC: LiteralDefault(config.win_loc),
        DEFAULT_DIR: FactoryDefault(_default_dir_factory(config)),
        "palette.pts": LiteralDefault(point_palette),
        "palette.grd": LiteralDefault(grid_palette),
        "crs": LiteralDefault(None),
        "sep": LiteralDefault(config.sep),
        "cex.pts": LiteralDefault(1.0),
        "nlevels": LiteralDefault(None),
        "asp.yx": LiteralDefault(None),
        "asp.zx": LiteralDefault(None),
        "legend.loc": LiteralDefault(None),
        "scale.loc": LiteralDefault(None),
        "arrow.loc": LiteralDefault(None),
        "bg.lines": LiteralDefault(0),
        "useRaster": LiteralDefault(1),
        "contour.lines": LiteralDefault(0),
        "dms.tick": LiteralDefault(0),
        "make.intervals": LiteralDefault(0),
        "proportional": LiteralDefault(0),
        "quantile.breaks": LiteralDefault(0),
        "draw.key": LiteralDefault(0),
        "max.dev.dim": LiteralDefault(tuple(config.max_dev_dim)),
    }
    return table


def coerce_default_table(entries: Mapping[str, Any]) -> dict[str, DefaultEntry]:
    """任意の {name: entry} を DefaultEntry のテーブルへ正規化して返す。

    LiteralDefault / FactoryDefault 以外の値は LiteralDefault として包む。
    """

    table: dict[str, DefaultEntry] = {}
    for name, entry in entries.items():
        if not isinstance(name, str):
            raise TypeError(f"既定値のキーは str である必要があります: got={name!r}")
        if isinstance(entry, (LiteralDefault, FactoryDefault)):
            table[name] = entry
        else:
            table[name] = LiteralDefault(entry)
    return table


__all__ = [
    "WIN_LOC",
    "DEFAULT_DIR",
    "PROJECT_KEYS",
    "DATA_RAW",
    "DATA_PTS",
    "DATA_GRD",
    "VERSION",
    "LiteralDefault",
    "FactoryDefault",
    "DefaultEntry",
    "build_default_table",
    "coerce_default_table",
]
