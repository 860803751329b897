# どこで: `src/surveyview/core/parameters/session.py`。
# 何を: ParameterStore の生成と破棄をセッション境界で行うヘルパを提供する。
# なぜ: モジュールグローバルのストアを持たず、生成したストアを呼び出し側へ明示的に渡すため。

from __future__ import annotations

import contextlib
from typing import Iterator

from surveyview.core.runtime_config import RuntimeConfig, runtime_config

from .defaults import build_default_table
from .store import ParameterStore


def open_parameter_store(config: RuntimeConfig | None = None) -> ParameterStore:
    """既定値テーブルを組み込んだ空の ParameterStore を返す。

    config 省略時は `runtime_config()` を使う。
    """

    cfg = runtime_config() if config is None else config
    return ParameterStore(defaults=build_default_table(cfg))


@contextlib.contextmanager
def parameter_session(config: RuntimeConfig | None = None) -> Iterator[ParameterStore]:
    """1 セッションぶんの ParameterStore を生成し、終了時に内容を破棄する。"""

    store = open_parameter_store(config)
    try:
        yield store
    finally:
        store.restore_all({})


__all__ = ["open_parameter_store", "parameter_session"]
