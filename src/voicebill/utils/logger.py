"""
日誌與計時工具

所有 logger 都掛在 `voicebill` 命名空間之下，函式庫本身不主動設定 handler，
讓使用者可以透過標準 logging 控制輸出。

使用方式:
    from voicebill import enable_debug_logging

    enable_debug_logging()

    # 或使用標準 logging
    import logging
    logging.getLogger("voicebill").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Optional

ROOT_LOGGER_NAME = "voicebill"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 voicebill 命名空間下的 logger

    Args:
        name: 子 logger 名稱，例如 "parser.segment"

    Returns:
        logging.Logger: `voicebill.<name>` logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 加上一個 StreamHandler（重複呼叫不會重複加）

    Args:
        level: 日誌等級
        fmt: 輸出格式

    Returns:
        logging.Logger: 根 logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    )
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def enable_debug_logging() -> None:
    """開啟 DEBUG 等級的完整日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌 (voicebill.timing)"""
    setup_logger(level=logging.INFO)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。

    範例:
        >>> with TimingContext("parse", logger=get_logger("engine")):
        ...     engine.parse_continuous_input(text)
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG) -> Callable:
    """
    計時裝飾器

    Args:
        operation: 記錄用的操作名稱，預設為函式 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
