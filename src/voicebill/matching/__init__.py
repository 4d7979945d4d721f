"""
比對模組

- similarity: 編輯距離相似度
- find_closest_match: 線性掃描詞庫
- LexiconMatcher: 長度分桶 + 緩存的詞庫比對器
"""

from .similarity import DEFAULT_THRESHOLD, LexiconMatcher, find_closest_match, similarity

__all__ = [
    "similarity",
    "find_closest_match",
    "LexiconMatcher",
    "DEFAULT_THRESHOLD",
]
