"""
事件模型（Event Model）

解析核心不應直接輸出到 stdout。
若需要取得「本次替換了哪些片段」等資訊，請使用事件回呼（event handler）。

回呼失敗只會被記錄到日誌，不會中斷解析：核心對任何輸入都必須回傳結果。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class CorrectionEvent(TypedDict, total=False):
    type: Literal["correction", "orthography", "normalization"]
    engine: str

    # correction
    original: str
    replacement: str
    kind: Literal["diglossia", "asr_error", "normalization"]
    score: float

    # orthography
    word: str
    issue: Literal["mei_start", "medial_uyir"]
    position: int


CorrectionEventHandler = Callable[[CorrectionEvent], None]
