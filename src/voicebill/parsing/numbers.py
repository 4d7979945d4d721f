"""
口語數字正規化

把 ASR 文字中的泰米爾 / 英文數字詞轉成阿拉伯數字，並修正常見的價格詞誤聽：

    "இரண்டு கிலோ தக்காளி ஐம்பது ரூபாய்"  ->  "2 கிலோ தக்காளி 50 ரூபாய்"
    "tomato two kg twenty five rupay"       ->  "tomato 2 kg 25 rupees"
"""

from __future__ import annotations

import re
from typing import Optional

from voicebill.core.lexicon import Lexicon

_THOUSANDS_SEPARATOR = re.compile(r"(?<=\d),(?=\d)")
_DECIMAL_POINT = re.compile(r"(?<=\d)\.(?=\d)")
_ASR_PUNCTUATION = re.compile(r"[.,;:]+")
_WHITESPACE = re.compile(r"\s+")
_COMPOUND_NUMBER = re.compile(r"(?<![\d.])([1-9]0)\s+([1-9])(?![\d.])")

# 保護小數點用的佔位字元
_DECIMAL_PLACEHOLDER = "\x00"


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def format_number(value: float) -> str:
    """整數值輸出為 "2"，其餘保留小數 "1.5" """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class NumberNormalizer:
    """
    轉錄文字的前處理與數字正規化

    兩個步驟都只依賴注入的 Lexicon，且對自身輸出冪等。
    """

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon
        self._patterns = lexicon.patterns

    def preprocess(self, text: Optional[str]) -> str:
        """
        清除 ASR 產生的標點雜訊並套用整詞 ASR 修正

        - "2,000" -> "2000"
        - "tomato. 2 kg," -> "tomato 2 kg"（小數點 "1.5" 保留）
        - "வெங்கயம்" -> "வெங்காயம்"
        """
        if not text:
            return ""

        processed = _THOUSANDS_SEPARATOR.sub("", text)
        processed = _DECIMAL_POINT.sub(_DECIMAL_PLACEHOLDER, processed)
        processed = _ASR_PUNCTUATION.sub(" ", processed)
        processed = processed.replace(_DECIMAL_PLACEHOLDER, ".")

        corrections = self._lexicon.asr_corrections
        if corrections:
            processed = self._patterns.asr_correction.sub(
                lambda m: corrections.get(m.group(0), corrections.get(m.group(0).lower(), m.group(0))),
                processed,
            )

        return collapse_whitespace(processed)

    def normalize_numbers(self, text: Optional[str]) -> str:
        """
        數字詞 -> 阿拉伯數字

        1. 轉小寫
        2. 數字詞單次替換（長詞優先，必須以空白或字串邊界分隔）
        3. 數字後的價格詞誤聽修正 ("50 rupay" -> "50 rupees")
        4. 十位 + 個位合併 ("20 5" -> "25")
        5. 合併空白
        """
        if not text:
            return ""

        normalized = text.lower()

        number_words = self._lexicon.number_words
        if number_words:
            normalized = self._patterns.number_words.sub(
                lambda m: number_words[m.group(0).lower()], normalized
            )

        rate_corrections = self._lexicon.rate_corrections
        if rate_corrections:
            normalized = self._patterns.rate_correction.sub(
                lambda m: f"{m.group('number')} {rate_corrections[m.group('keyword').lower()]}",
                normalized,
            )

        normalized = _COMPOUND_NUMBER.sub(
            lambda m: str(int(m.group(1)) + int(m.group(2))), normalized
        )

        return collapse_whitespace(normalized)

    def normalize(self, text: Optional[str]) -> str:
        """preprocess + normalize_numbers"""
        return self.normalize_numbers(self.preprocess(text))
