"""
日誌與計時工具測試
"""

import logging

from voicebill.matching.similarity import LexiconMatcher
from voicebill.utils.logger import TimingContext, get_logger, log_timing, setup_logger


class TestLogger:
    """測試 logger 命名空間"""

    def test_child_logger_name(self):
        assert get_logger("parser.segment").name == "voicebill.parser.segment"

    def test_root_logger(self):
        assert get_logger().name == "voicebill"
        assert get_logger("voicebill.engine").name == "voicebill.engine"

    def test_setup_logger_does_not_duplicate_handlers(self):
        logger = setup_logger(level=logging.WARNING)
        count = len(logger.handlers)
        setup_logger(level=logging.WARNING)
        assert len(logger.handlers) == count


class TestTiming:
    """測試計時工具"""

    def test_timing_context_callback(self):
        recorded = []
        with TimingContext("op", callback=lambda name, elapsed: recorded.append((name, elapsed))) as timing:
            sum(range(100))
        assert recorded[0][0] == "op"
        assert recorded[0][1] == timing.elapsed
        assert timing.elapsed >= 0

    def test_timing_context_logs(self, caplog):
        logger = get_logger("test.timing")
        with caplog.at_level(logging.DEBUG, logger="voicebill.test.timing"):
            with TimingContext("segment", logger=logger):
                pass
        assert any("[Timing] segment" in r.getMessage() for r in caplog.records)

    def test_log_timing_decorator_keeps_result(self):
        @log_timing("double")
        def double(x):
            return x * 2

        assert double(21) == 42
        assert double.__name__ == "double"


class TestMatcherCacheClear:
    def test_clear_cache(self):
        matcher = LexiconMatcher(["தக்காளி"])
        cached = matcher.closest("தக்காலி", 0.75)
        matcher.clear_cache()
        assert matcher.closest("தக்காலி", 0.75) == cached
