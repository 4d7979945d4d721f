"""
voicebill - 泰米爾 / 英文雜貨帳單語音解析器 (Tamil/English Voice Billing Parser)

核心概念：
- 語音辨識持續輸出「到目前為止的完整轉錄」
- 每次更新都重新解析整段轉錄：數字正規化 -> 品項切分 -> 欄位擷取 -> 品名書面化
- 說出的價格是「總價」，儲存的是「單價」(總價 ÷ 數量)

官方入口（穩定 API）：
- `voicebill.parse_continuous_input(transcript)`
- `voicebill.formalize_for_display(text)`
- `voicebill.BillingEngine`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from voicebill.engine import (
    BillingEngine,
    formalize_for_display,
    get_default_engine,
    parse_continuous_input,
    parse_segment,
)

# =============================================================================
# 資料模型與詞庫
# =============================================================================
from voicebill.core.lexicon import Lexicon
from voicebill.core.models import (
    Correction,
    CorrectionKind,
    LinguisticResult,
    OrthographyIssue,
    ParsedItem,
)
from voicebill.config import DEFAULT_CONFIG, ParserConfig

# =============================================================================
# 日誌工具
# =============================================================================
from voicebill.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# Session 層（呼叫端持有的狀態）
# =============================================================================
from voicebill.session import BillingSession, BillItem

__all__ = [
    # Engine
    "BillingEngine",
    "get_default_engine",
    "parse_continuous_input",
    "formalize_for_display",
    "parse_segment",
    # Models
    "Lexicon",
    "ParsedItem",
    "Correction",
    "CorrectionKind",
    "LinguisticResult",
    "OrthographyIssue",
    # Config
    "ParserConfig",
    "DEFAULT_CONFIG",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Session
    "BillingSession",
    "BillItem",
]

__version__ = "0.1.0"
