# どこで: `src/surveyview/__init__.py`。
# 何を: ルート `surveyview` パッケージを定義する。
# なぜ: import 起点を `surveyview` に統一するため。

from __future__ import annotations

from surveyview.core.parameters import ParameterStore, open_parameter_store, parameter_session

__version__ = "0.1.0"

__all__ = ["ParameterStore", "open_parameter_store", "parameter_session", "__version__"]
