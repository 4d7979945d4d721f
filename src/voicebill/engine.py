"""
帳單解析引擎 (BillingEngine)

負責持有共享的詞庫、比對器、書面化引擎與切分器，並提供兩個對外入口：

- parse_continuous_input(transcript): 語音轉錄 -> 有序品項列表
- formalize_for_display(text): 匯出 / 顯示用的泰米爾文書面化

使用方式:
    from voicebill import BillingEngine

    engine = BillingEngine()
    engine.parse_continuous_input("tomato 2 kg 50 rupees potato 1 kg 20 rupees")
"""

from __future__ import annotations

from dataclasses import is_dataclass, replace
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Optional

from voicebill.config import ParserConfig
from voicebill.core.engine_interface import ParsingEngine
from voicebill.core.events import CorrectionEventHandler
from voicebill.core.lexicon import Lexicon
from voicebill.core.models import LinguisticResult, ParsedItem
from voicebill.languages.tamil.formalizer import TamilFormalizer
from voicebill.matching.similarity import LexiconMatcher
from voicebill.parsing.numbers import NumberNormalizer
from voicebill.parsing.segment_parser import SegmentParser
from voicebill.parsing.segmenter import StreamSegmenter
from voicebill.utils.cache import get_cache_stats


class BillingEngine(ParsingEngine):
    _engine_name = "billing"

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        config: Optional[ParserConfig] = None,
        *,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[CorrectionEventHandler] = None,
    ):
        if config is None:
            config = ParserConfig(verbose=verbose, on_timing=on_timing)
        self._config = config
        self._init_logger(verbose=config.verbose, on_timing=config.on_timing)

        with self._log_timing("BillingEngine.__init__"):
            self._lexicon = lexicon or Lexicon.default()
            # 觸發 regex 編譯，讓第一次解析不需付出編譯成本
            _ = self._lexicon.patterns

            self._matcher = LexiconMatcher(self._lexicon.grocery_lexicon)
            self._formalizer = TamilFormalizer(
                self._lexicon,
                self._matcher,
                threshold=config.fuzzy_threshold,
                on_event=on_event,
            )
            self._normalizer = NumberNormalizer(self._lexicon)
            self._segment_parser = SegmentParser(
                self._lexicon, normalizer=self._normalizer, formalizer=self._formalizer
            )
            self._segmenter = StreamSegmenter(
                self._lexicon, normalizer=self._normalizer, parser=self._segment_parser
            )

            self._initialized = True
            self._logger.info(f"BillingEngine initialized ({len(self._matcher)} lexicon entries)")

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def matcher(self) -> LexiconMatcher:
        return self._matcher

    @property
    def formalizer(self) -> TamilFormalizer:
        return self._formalizer

    @property
    def normalizer(self) -> NumberNormalizer:
        return self._normalizer

    @property
    def segment_parser(self) -> SegmentParser:
        return self._segment_parser

    @property
    def segmenter(self) -> StreamSegmenter:
        return self._segmenter

    def is_initialized(self) -> bool:
        return self._initialized

    def get_cache_stats(self) -> Dict[str, Any]:
        return get_cache_stats("LexiconMatcher.closest")

    def parse_continuous_input(self, transcript: str) -> List[ParsedItem]:
        """
        解析到目前為止的完整轉錄

        Args:
            transcript: 持續增長的語音轉錄文字

        Returns:
            List[ParsedItem]: 依說話順序排列，最後一個可能是未完成的 live 品項
        """
        with self._log_timing("BillingEngine.parse_continuous_input"):
            items = self._segmenter.parse(transcript)
        self._logger.debug(f"Parsed {len(items)} item(s) from transcript")
        return items

    def parse_segment(self, segment: str) -> ParsedItem:
        return self._segment_parser.parse(segment)

    def formalize_for_display(self, text: str) -> str:
        return self._formalizer.formalize(text)

    def process_text(self, text: str) -> LinguisticResult:
        """書面化並回傳完整報告（修正紀錄與正字法診斷）"""
        with self._log_timing("BillingEngine.process_text"):
            return self._formalizer.process(text)

    def process_bill_items(self, items: Iterable[Any]) -> List[Any]:
        """
        匯出前批次書面化品項的 name 與 quantity

        接受 dict 或 dataclass（例如 BillItem / ParsedItem），回傳新物件，不修改輸入。
        """
        processed: List[Any] = []
        for item in items:
            if is_dataclass(item):
                processed.append(
                    replace(
                        item,
                        name=self._formalize_field(item.name),
                        quantity=self._formalize_field(item.quantity),
                    )
                )
            else:
                row = dict(item)
                row["name"] = self._formalize_field(row.get("name"))
                if "quantity" in row:
                    row["quantity"] = self._formalize_field(row["quantity"])
                processed.append(row)
        return processed

    def _formalize_field(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return value
        return self._formalizer.formalize(value)


@lru_cache(maxsize=1)
def get_default_engine() -> BillingEngine:
    """以預設詞庫建立的全域引擎（每個 process 只建一次）"""
    return BillingEngine()


def parse_continuous_input(transcript: str) -> List[ParsedItem]:
    return get_default_engine().parse_continuous_input(transcript)


def formalize_for_display(text: str) -> str:
    return get_default_engine().formalize_for_display(text)


def parse_segment(segment: str) -> ParsedItem:
    return get_default_engine().parse_segment(segment)
