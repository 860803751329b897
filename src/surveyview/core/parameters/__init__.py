# どこで: `src/surveyview/core/parameters/__init__.py`。
# 何を: パラメータストアの公開エイリアスをまとめる。
# なぜ: GUI/インポート/描画側から最小インポートで使えるようにするため。

from .attributes import Attributed
from .defaults import (
    DATA_GRD,
    DATA_PTS,
    DATA_RAW,
    DEFAULT_DIR,
    PROJECT_KEYS,
    VERSION,
    WIN_LOC,
    FactoryDefault,
    LiteralDefault,
    build_default_table,
)
from .errors import DefaultValueError, InvalidPathError
from .key import Key, KeyPath, normalize_path
from .resolver import ResolvedPath, resolve_path
from .session import open_parameter_store, parameter_session
from .store import ParameterStore
from .value_ops import SetResult

__all__ = [
    "Attributed",
    "DATA_GRD",
    "DATA_PTS",
    "DATA_RAW",
    "DEFAULT_DIR",
    "PROJECT_KEYS",
    "VERSION",
    "WIN_LOC",
    "FactoryDefault",
    "LiteralDefault",
    "build_default_table",
    "DefaultValueError",
    "InvalidPathError",
    "Key",
    "KeyPath",
    "normalize_path",
    "ResolvedPath",
    "resolve_path",
    "open_parameter_store",
    "parameter_session",
    "ParameterStore",
    "SetResult",
]
