"""
Aho-Corasick 多模式字串匹配（無第三方依賴）

用途：
- 在整段轉錄中一次掃描所有已知品項名稱（數百個 pattern）
- 配合 leftmost-longest 選擇，讓 "சின்ன வெங்காயம்" 優先於 "வெங்காயம்"
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Match = Tuple[int, int, str, T]


@dataclass
class _Node(Generic[T]):
    next: Dict[str, int] = field(default_factory=dict)
    fail: int = 0
    out: List[Tuple[str, T]] = field(default_factory=list)


class AhoCorasick(Generic[T]):
    def __init__(self) -> None:
        self._nodes: List[_Node[T]] = [_Node()]
        self._built = False
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def add(self, word: str, value: T) -> None:
        if self._built:
            raise RuntimeError("AhoCorasick 已 build()，不可再 add()")
        if not word:
            return

        node = 0
        for ch in word:
            nxt = self._nodes[node].next.get(ch)
            if nxt is None:
                nxt = len(self._nodes)
                self._nodes[node].next[ch] = nxt
                self._nodes.append(_Node())
            node = nxt
        self._nodes[node].out.append((word, value))
        self._size += 1

    def build(self) -> None:
        if self._built:
            return

        queue: deque[int] = deque()
        for nxt in self._nodes[0].next.values():
            self._nodes[nxt].fail = 0
            queue.append(nxt)

        while queue:
            r = queue.popleft()
            for ch, u in self._nodes[r].next.items():
                queue.append(u)

                v = self._nodes[r].fail
                while v != 0 and ch not in self._nodes[v].next:
                    v = self._nodes[v].fail
                self._nodes[u].fail = self._nodes[v].next.get(ch, 0)

                # fail link 的輸出也屬於這個狀態
                self._nodes[u].out.extend(self._nodes[self._nodes[u].fail].out)

        self._built = True

    def iter_matches(self, text: str) -> Iterator[Match]:
        """
        逐一輸出所有（可能重疊的）matches

        Yields:
            (start, end, word, value)
            - start: match 起始 index（含）
            - end: match 結束 index（不含）
        """
        if not self._built:
            self.build()

        state = 0
        for i, ch in enumerate(text):
            while state != 0 and ch not in self._nodes[state].next:
                state = self._nodes[state].fail
            state = self._nodes[state].next.get(ch, 0)

            if not self._nodes[state].out:
                continue

            for word, value in self._nodes[state].out:
                start = i - len(word) + 1
                end = i + 1
                if start >= 0:
                    yield start, end, word, value

    def find_leftmost_longest(
        self,
        text: str,
        accept: Optional[Callable[[str, int, int], bool]] = None,
    ) -> List[Match]:
        """
        取得不重疊的 matches：起點最左者優先，同起點取最長者

        Args:
            text: 待掃描文本
            accept: 額外的過濾條件 (text, start, end) -> bool，例如詞邊界檢查

        Returns:
            依出現順序排列的 (start, end, word, value) 列表
        """
        candidates = [
            m for m in self.iter_matches(text)
            if accept is None or accept(text, m[0], m[1])
        ]
        candidates.sort(key=lambda m: (m[0], -(m[1] - m[0])))

        selected: List[Match] = []
        cursor = 0
        for match in candidates:
            if match[0] < cursor:
                continue
            selected.append(match)
            cursor = match[1]
        return selected
