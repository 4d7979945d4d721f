"""
工具模組

提供日誌、計時、緩存與多模式字串匹配等通用工具。
"""

from .aho_corasick import AhoCorasick
from .cache import cached_method, clear_all_caches, get_cache_stats, reset_cache_stats
from .logger import (
    TimingContext,
    enable_debug_logging,
    enable_timing_logging,
    get_logger,
    log_timing,
    setup_logger,
)

__all__ = [
    # 日誌工具
    "get_logger",
    "setup_logger",
    "log_timing",
    "enable_debug_logging",
    "enable_timing_logging",
    "TimingContext",

    # 緩存
    "cached_method",
    "get_cache_stats",
    "reset_cache_stats",
    "clear_all_caches",

    # 字串匹配
    "AhoCorasick",
]
