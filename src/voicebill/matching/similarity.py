"""
相似度比對模組

以 Levenshtein 編輯距離計算字串相似度，並在詞庫中尋找最接近的項目。
formalizer 的 ASR 模糊修正與品名正規化都共用這裡的演算法。

相似度定義：
    similarity(a, b) = 1 - distance(a, b) / max(len(a), len(b))
    兩個空字串視為完全相同 (1.0)
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

import Levenshtein

from voicebill.utils.cache import cached_method
from voicebill.utils.logger import get_logger

DEFAULT_THRESHOLD = 0.75


def similarity(a: str, b: str) -> float:
    """
    計算兩個字串的相似度

    Returns:
        float: 0.0 ~ 1.0，1.0 表示完全相同
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / max_len


def find_closest_match(
    word: str,
    lexicon: Iterable[str],
    threshold: float = DEFAULT_THRESHOLD,
) -> Tuple[str, float]:
    """
    線性掃描詞庫，找出相似度最高的項目

    同分時先出現者勝出（詞庫宣告順序）。
    最高分低於 threshold 時回傳原詞，但仍回報最高分。

    Args:
        word: 待比對的詞
        lexicon: 詞庫
        threshold: 接受門檻

    Returns:
        (match, score)
    """
    best_match = word
    best_score = 0.0

    for entry in lexicon:
        score = similarity(word, entry)
        if score > best_score:
            best_score = score
            best_match = entry

    if best_score >= threshold:
        return best_match, best_score
    return word, best_score


class LexiconMatcher:
    """
    依長度分桶的詞庫比對器

    編輯距離至少等於長度差，因此長度差過大的項目不可能達到門檻：
        |len(a) - len(b)| <= (1 - threshold) * max(len(a), len(b))
    只對可能過門檻的分桶計算相似度，並保留宣告順序作為 tie-break。

    達到門檻的結果與 find_closest_match 完全一致；
    未達門檻時回報的分數是「實際計算過的候選」中的最高分（無候選則為 0.0）。
    """

    def __init__(self, entries: Sequence[str]):
        self._entries: Tuple[str, ...] = tuple(entries)
        self._logger = get_logger("matching.lexicon")

        buckets: Dict[int, List[int]] = {}
        for idx, entry in enumerate(self._entries):
            buckets.setdefault(len(entry), []).append(idx)
        self._buckets = buckets

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def _candidate_indices(self, word: str, threshold: float) -> List[int]:
        n = len(word)
        slack = 1.0 - threshold
        indices: List[int] = []
        for length, bucket in self._buckets.items():
            if abs(n - length) <= slack * max(n, length) + 1e-9:
                indices.extend(bucket)
        indices.sort()
        return indices

    @cached_method(maxsize=4096)
    def closest(self, word: str, threshold: float = DEFAULT_THRESHOLD) -> Tuple[str, float]:
        """
        找出最接近的詞庫項目

        Returns:
            (match, score)；低於門檻時 match 為原詞
        """
        best_match = word
        best_score = 0.0

        for idx in self._candidate_indices(word, threshold):
            entry = self._entries[idx]
            score = similarity(word, entry)
            if score > best_score:
                best_score = score
                best_match = entry

        if best_score >= threshold:
            return best_match, best_score
        return word, best_score

    def clear_cache(self) -> None:
        LexiconMatcher.closest.cache_clear(self)
