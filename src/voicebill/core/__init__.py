"""
核心抽象層

定義語系無關的資料模型、詞庫組合、事件與引擎基類。
"""

from .engine_interface import ParsingEngine
from .events import CorrectionEvent, CorrectionEventHandler
from .lexicon import Lexicon, LexiconPatterns, default_lexicon
from .models import (
    Correction,
    CorrectionKind,
    LinguisticResult,
    OrthographyIssue,
    ParsedItem,
)

__all__ = [
    "ParsingEngine",
    "CorrectionEvent",
    "CorrectionEventHandler",
    "Lexicon",
    "LexiconPatterns",
    "default_lexicon",
    "Correction",
    "CorrectionKind",
    "LinguisticResult",
    "OrthographyIssue",
    "ParsedItem",
]
