"""
Fuzzy Matcher Protocol

定義 formalizer 所需的最小比對介面（word -> 最接近的詞庫項目）。
"""

from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class FuzzyMatcherProtocol(Protocol):
    def closest(self, word: str, threshold: float = 0.75) -> Tuple[str, float]:
        """回傳 (match, score)；低於門檻時 match 為原詞"""
        ...
