"""
單一片段解析器

把一段（理論上只含一個品項的）文字拆成 品名 / 數量 / 單價。

步驟（每一步都會把命中的子字串從工作文字中移除）：
1. 小寫 + 數字詞正規化
2. 數量：<數字><單位> 或 <單位><數字>，找不到時嘗試黏著的分數詞 ("அரைகிலோ")
3. 價格：<數字><價格詞> 或 <價格詞><數字>，說出的是「總價」
4. 單價 = 總價 / 數量；沒有價格詞但有數量時，剩餘的單獨數字視為總價
5. 品名：剩下的文字去掉符號
6. 品名書面化（含泰米爾文）或首字母大寫（拉丁文）
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from voicebill.core.lexicon import Lexicon
from voicebill.core.models import ParsedItem
from voicebill.languages.tamil.formalizer import TamilFormalizer
from voicebill.languages.tamil.orthography import contains_tamil, is_tamil_char
from voicebill.utils.logger import get_logger

from .numbers import NumberNormalizer, collapse_whitespace, format_number

_NAME_NOISE = re.compile(r"[^\w\s\u0B80-\u0BFF\-]")
_STANDALONE_NUMBER = re.compile(r"(?<![\d.])\d+(?:\.\d+)?(?![\d.])")


def _splice(text: str, match: re.Match) -> str:
    """以空白取代命中的區段"""
    return collapse_whitespace(f"{text[:match.start()]} {text[match.end():]}")


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


class SegmentParser:
    """
    單一片段解析器

    使用方式:
        parser = SegmentParser(Lexicon.default())
        parser.parse("tomato 2 kg 50 rupees")
        # ParsedItem(name='Tomato', quantity='2 kg', rate=25.0)

    本類別無狀態，同一實例可被重複呼叫。
    """

    def __init__(
        self,
        lexicon: Lexicon,
        normalizer: Optional[NumberNormalizer] = None,
        formalizer: Optional[TamilFormalizer] = None,
    ):
        self._lexicon = lexicon
        self._patterns = lexicon.patterns
        self._normalizer = normalizer or NumberNormalizer(lexicon)
        self._formalizer = formalizer or TamilFormalizer(lexicon)
        self._logger = get_logger("parser.segment")

    def parse(self, segment: Optional[str]) -> ParsedItem:
        """
        解析單一片段

        Args:
            segment: 片段文字（可為 None 或空字串）

        Returns:
            ParsedItem: 找不到的欄位為 None
        """
        text = self._normalizer.normalize_numbers(collapse_whitespace(segment or ""))
        text = collapse_whitespace(text.replace(",", ""))

        quantity, quantity_number, text = self._extract_quantity(text)
        total_price, text = self._extract_price(text)

        rate: Optional[float] = None
        if total_price is not None:
            rate = self._compute_rate(total_price, quantity_number)

        if rate is None and quantity is not None:
            match = _STANDALONE_NUMBER.search(text)
            if match:
                rate = self._compute_rate(float(match.group(0)), quantity_number)
                text = _splice(text, match)

        name = self._extract_name(text)

        item = ParsedItem(name=name, quantity=quantity, rate=rate)
        self._logger.debug(f"[Segment] '{segment}' -> {item}")
        return item

    @staticmethod
    def _compute_rate(total_price: float, quantity_number: float) -> float:
        if quantity_number > 0:
            return total_price / quantity_number
        return total_price

    def _extract_quantity(self, text: str) -> Tuple[Optional[str], float, str]:
        """回傳 (quantity 字串, 數量數值, 剩餘文字)；數量數值預設為 1"""
        patterns = self._patterns
        for pattern in (patterns.quantity_after, patterns.quantity_before):
            match = pattern.search(text)
            if match:
                number = _to_float(match.group("number"))
                if number is None:
                    number = 1.0
                quantity = f"{format_number(number)} {match.group('unit')}"
                return quantity, number, _splice(text, match)

        if self._lexicon.fraction_words:
            match = patterns.fraction_quantity.search(text)
            if match:
                fraction = match.group("fraction")
                number = self._lexicon.fraction_words.get(fraction, 1.0)
                quantity = f"{fraction} {match.group('unit')}"
                return quantity, number, _splice(text, match)

        return None, 1.0, text

    def _extract_price(self, text: str) -> Tuple[Optional[float], str]:
        patterns = self._patterns
        for pattern in (patterns.price_after, patterns.price_before):
            match = pattern.search(text)
            if match:
                price = _to_float(match.group("number"))
                if price is not None:
                    return price, _splice(text, match)
        return None, text

    def _extract_name(self, text: str) -> Optional[str]:
        name = collapse_whitespace(_NAME_NOISE.sub(" ", text))
        if not any(ch.isalpha() or is_tamil_char(ch) for ch in name):
            return None

        if contains_tamil(name):
            name = self._formalizer.formalize(name)

        if name and not is_tamil_char(name[0]):
            name = name[0].upper() + name[1:]

        return name or None
