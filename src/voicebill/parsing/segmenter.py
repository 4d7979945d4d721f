"""
連續語音串流切分器

每次轉錄文字更新時，對「到目前為止的完整轉錄」重新解析：

1. 前處理 + 數字正規化（整段一次）
2. 主要切分：每個價格表達式 ("50 rupees", "ரூ 40") 的結尾是一個品項邊界
3. 備援切分（整段找不到任何價格表達式時）：以已知品名作為品項起點
4. 尾段永遠以「live 品項」附加在最後，不做完整性過濾

兩種策略不會在同一次呼叫中混用：只要出現一個價格邊界，就只用主要切分。
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from voicebill.core.lexicon import Lexicon
from voicebill.core.models import ParsedItem
from voicebill.languages.tamil.orthography import is_tamil_char
from voicebill.utils.logger import get_logger

from .numbers import NumberNormalizer
from .segment_parser import SegmentParser


class Segment(NamedTuple):
    text: str
    is_live: bool = False


def _is_name_boundary(text: str, start: int, end: int) -> bool:
    """品名前面不可緊貼字母；拉丁字母結尾的品名後面不可緊接拉丁字母"""
    if start > 0:
        before = text[start - 1]
        if before.isalpha() or is_tamil_char(before):
            return False

    last = text[end - 1]
    if end < len(text) and "a" <= last.lower() <= "z":
        if "a" <= text[end].lower() <= "z":
            return False

    return True


class StreamSegmenter:
    """
    串流切分器

    使用方式:
        segmenter = StreamSegmenter(Lexicon.default())
        segmenter.parse("tomato 2 kg 50 rupees potato 1 kg")
        # [ParsedItem(name='Tomato', quantity='2 kg', rate=25.0),
        #  ParsedItem(name='Potato', quantity='1 kg', rate=None)]   <- live

    輸出只由輸入字串決定，可對持續增長的轉錄文字重複呼叫。
    """

    def __init__(
        self,
        lexicon: Lexicon,
        normalizer: Optional[NumberNormalizer] = None,
        parser: Optional[SegmentParser] = None,
    ):
        self._lexicon = lexicon
        self._patterns = lexicon.patterns
        self._normalizer = normalizer or NumberNormalizer(lexicon)
        self._parser = parser or SegmentParser(lexicon, normalizer=self._normalizer)
        self._logger = get_logger("parser.stream")

    def split(self, transcript: Optional[str]) -> List[Segment]:
        """
        把完整轉錄切成有序片段

        Returns:
            List[Segment]: 最後一個片段若為尾段則 is_live=True
        """
        text = self._normalizer.normalize(transcript)
        if not text:
            return []

        boundaries = list(self._patterns.price_boundary.finditer(text))
        if boundaries:
            return self._split_by_price(text, boundaries)
        return self._split_by_item_names(text)

    def parse(self, transcript: Optional[str]) -> List[ParsedItem]:
        """
        解析完整轉錄

        已完成的片段只有在有品名或數量時保留；live 尾段一律保留。
        """
        results: List[ParsedItem] = []
        for segment in self.split(transcript):
            item = self._parser.parse(segment.text)
            if segment.is_live or item.has_name_or_quantity():
                results.append(item)
            else:
                self._logger.debug(f"[Stream] 丟棄雜訊片段: '{segment.text}'")
        return results

    def _split_by_price(self, text: str, boundaries) -> List[Segment]:
        segments: List[Segment] = []
        last_end = 0
        for match in boundaries:
            segments.append(Segment(text[last_end:match.end()]))
            last_end = match.end()

        tail = text[last_end:].strip()
        if tail:
            segments.append(Segment(tail, is_live=True))
        return segments

    def _split_by_item_names(self, text: str) -> List[Segment]:
        matches = self._patterns.item_names.find_leftmost_longest(text, accept=_is_name_boundary)
        if not matches:
            return [Segment(text, is_live=True)]

        starts = [m[0] for m in matches]
        segments: List[Segment] = []
        for idx, start in enumerate(starts):
            # 第一個品名之前的文字併入第一個品項
            seg_start = 0 if idx == 0 else start
            is_last = idx + 1 == len(starts)
            seg_end = len(text) if is_last else starts[idx + 1]
            segments.append(Segment(text[seg_start:seg_end].strip(), is_live=is_last))
        return segments
