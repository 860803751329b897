# どこで: `src/surveyview/core/parameters/errors.py`。
# 何を: ParameterStore が送出する例外型を定義する。
# なぜ: 既定の fail-silent 動作を保ちつつ、厳格な呼び出し側やテストが失敗を識別できるようにするため。

from __future__ import annotations

from .key import KeyPath, format_path


class InvalidPathError(ValueError):
    """set できないキーパスが指定された（`strict=True` のときのみ送出）。"""

    def __init__(self, path: KeyPath, resolved_depth: int) -> None:
        self.path = path
        self.resolved_depth = int(resolved_depth)
        super().__init__(
            f"key path を解決できません: path={format_path(path)}"
            f" resolved={self.resolved_depth}/{len(path)}"
        )


class DefaultValueError(RuntimeError):
    """既定値ファクトリの呼び出しに失敗した。元の例外は `__cause__` に残る。"""

    def __init__(self, name: str) -> None:
        self.name = str(name)
        super().__init__(f"既定値の計算に失敗しました: key={self.name!r}")


__all__ = ["InvalidPathError", "DefaultValueError"]
