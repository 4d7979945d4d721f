"""
解析引擎抽象基類

定義帳單解析引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from voicebill.utils.logger import TimingContext, get_logger, setup_logger

from .models import ParsedItem


class ParsingEngine(ABC):
    """
    解析引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的詞庫、比對器、書面化引擎
    - 對外提供串流解析與書面化入口
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次，之後重複呼叫
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def parse_continuous_input(self, transcript: str) -> List[ParsedItem]:
        pass

    @abstractmethod
    def formalize_for_display(self, text: str) -> str:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_cache_stats(self) -> Dict[str, Any]:
        pass
