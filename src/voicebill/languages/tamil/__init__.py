"""
泰米爾語模組

提供泰米爾語口語 -> 書面語轉換、ASR 模糊修正與正字法檢查。

主要類別:
- TamilFormalizer: 書面化引擎
- TamilLinguisticConfig: 泰米爾語靜態表格（數字、單位、diglossia、雜貨詞庫）

工具函數:
- contains_tamil / is_tamil_char / validate_orthography
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    "TamilFormalizer": (".formalizer", "TamilFormalizer"),
    "TamilLinguisticConfig": (".config", "TamilLinguisticConfig"),
    "contains_tamil": (".orthography", "contains_tamil"),
    "is_tamil_char": (".orthography", "is_tamil_char"),
    "validate_orthography": (".orthography", "validate_orthography"),
}

__all__ = [
    "TamilFormalizer",
    "TamilLinguisticConfig",
    "contains_tamil",
    "is_tamil_char",
    "validate_orthography",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
