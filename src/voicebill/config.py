"""
全域配置模組

提供統一的配置類別，控制日誌、計時與模糊比對門檻。

使用方式:
    from voicebill import BillingEngine

    # 簡單開啟 verbose 模式
    engine = BillingEngine(verbose=True)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("voicebill").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    verbose=False 時不做任何設定，讓使用者透過標準 logging 控制。
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class ParserConfig:
    """
    解析器配置類別 (進階用途)

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        fuzzy_threshold: 泰米爾詞模糊修正的相似度門檻
        include_price: BillingSession 是否保留單價（關閉時單價一律為 0）

    使用範例:
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        engine = BillingEngine(config=ParserConfig(verbose=True, on_timing=my_callback))
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    fuzzy_threshold: float = 0.75
    include_price: bool = True

    def __post_init__(self):
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = ParserConfig(verbose=False)
