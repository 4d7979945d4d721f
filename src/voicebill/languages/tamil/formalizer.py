"""
泰米爾語書面化引擎 (Formalizer)

把 ASR 轉出來的口語泰米爾文字轉成正字法正確的書面語，用於品名與匯出文件。

處理流程（嚴格依序）：
1. Unicode NFC 正規化
2. 空白正規化（移除零寬字元、合併空白）
3. 標點正規化（彎引號、省略號、破折號）
4. 泰米爾文字偵測
5. Code-mixing：英文借詞白名單原樣保留
6. Diglossia：口語 -> 書面語 exact-match
7. 模糊修正：只對含泰米爾字元且 6 未命中的 token，以詞庫比對
8. 正字法檢查（僅診斷）

使用方式:
    from voicebill.core.lexicon import Lexicon
    from voicebill.languages.tamil import TamilFormalizer

    formalizer = TamilFormalizer(Lexicon.default())
    formalizer.formalize("தக்காள 2 கிலோ")  # 'தக்காளி 2 கிலோகிராம்'
"""

from __future__ import annotations

import re
import unicodedata
from typing import Dict, List, Optional, Sequence

from voicebill.core.events import CorrectionEvent, CorrectionEventHandler
from voicebill.core.lexicon import Lexicon
from voicebill.core.models import Correction, CorrectionKind, LinguisticResult
from voicebill.core.protocols.matcher import FuzzyMatcherProtocol
from voicebill.matching.similarity import DEFAULT_THRESHOLD, LexiconMatcher
from voicebill.utils.logger import get_logger

from .orthography import contains_tamil, validate_orthography

_ZERO_WIDTH = re.compile("[\u200B-\u200D\uFEFF]")
_WHITESPACE = re.compile(r"\s+")
_TOKEN_SPLIT = re.compile(r"(\s+)")
_NUMERIC_TOKEN = re.compile(r"[\d.,₹]+")

_PUNCTUATION_MAP = {
    "“": '"', "”": '"', "„": '"',
    "‘": "'", "’": "'",
    "…": "...",
    "–": "-", "—": "-",
}
_PUNCTUATION = re.compile("|".join(re.escape(k) for k in _PUNCTUATION_MAP))


def normalize_unicode(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", _ZERO_WIDTH.sub("", text)).strip()


def normalize_punctuation(text: str) -> str:
    return _PUNCTUATION.sub(lambda m: _PUNCTUATION_MAP[m.group(0)], text)


def _is_passthrough(token: str) -> bool:
    """純數字 / 純標點 token 不做任何處理"""
    if _NUMERIC_TOKEN.fullmatch(token):
        return True
    return not any(ch.isalnum() or contains_tamil(ch) for ch in token)


class TamilFormalizer:
    """
    泰米爾語書面化引擎

    功能:
    - 口語 -> 書面語 (diglossia) 映射
    - 以編輯距離對照雜貨詞庫修正 ASR 錯誤
    - 保留英文借詞與數字
    - 多詞書面語片語 (如 "கோழி இறைச்சி") 視為一個單位，確保重複處理結果不變
    - 收集正字法診斷

    本類別無狀態（除了比對器的緩存），可被重複與並行呼叫。
    """

    def __init__(
        self,
        lexicon: Lexicon,
        matcher: Optional[FuzzyMatcherProtocol] = None,
        *,
        threshold: float = DEFAULT_THRESHOLD,
        on_event: Optional[CorrectionEventHandler] = None,
    ):
        self._lexicon = lexicon
        self._matcher = matcher if matcher is not None else LexiconMatcher(lexicon.grocery_lexicon)
        self._threshold = threshold
        self._on_event = on_event
        self._logger = get_logger("formalizer.tamil")

        phrases: Dict[str, List[Sequence[str]]] = {}
        for phrase in lexicon.formal_phrases:
            phrases.setdefault(phrase[0], []).append(phrase)
        self._phrases_by_head = phrases

    @property
    def matcher(self) -> FuzzyMatcherProtocol:
        return self._matcher

    @property
    def threshold(self) -> float:
        return self._threshold

    def formalize(self, text: str) -> str:
        """書面化文字，只回傳處理後字串"""
        return self.process(text).processed_text

    def process(self, text: str) -> LinguisticResult:
        """
        書面化文字並回傳完整報告

        Args:
            text: 原始文字（可為混合語言）

        Returns:
            LinguisticResult: 處理後文字、修正紀錄、正字法診斷
        """
        raw = text or ""
        result = LinguisticResult(original_text=raw, processed_text=raw)
        if not raw.strip():
            return result

        normalized = normalize_punctuation(normalize_whitespace(normalize_unicode(raw)))
        if normalized != raw:
            result.corrections.append(
                Correction(original=raw, corrected=normalized, kind=CorrectionKind.NORMALIZATION)
            )

        result.contains_tamil = contains_tamil(normalized)

        parts = _TOKEN_SPLIT.split(normalized)
        words = parts[0::2]
        separators = parts[1::2]

        processed: List[str] = []
        i = 0
        while i < len(words):
            phrase_len = self._match_phrase(words, i)
            if phrase_len:
                for word in words[i:i + phrase_len]:
                    processed.append(word)
                    self._check_orthography(word, result)
                i += phrase_len
                continue

            word = self._process_word(words[i], result)
            for piece in word.split():
                self._check_orthography(piece, result)
            processed.append(word)
            i += 1

        pieces: List[str] = []
        for idx, word in enumerate(processed):
            pieces.append(word)
            if idx < len(separators):
                pieces.append(separators[idx])
        result.processed_text = "".join(pieces)

        return result

    def _match_phrase(self, words: List[str], start: int) -> int:
        for phrase in self._phrases_by_head.get(words[start], ()):
            n = len(phrase)
            if tuple(words[start:start + n]) == tuple(phrase):
                return n
        return 0

    def _process_word(self, word: str, result: LinguisticResult) -> str:
        if not word or _is_passthrough(word):
            return word

        lower = word.lower()
        if lower in self._lexicon.preserved_words:
            return word

        formal_map = self._lexicon.colloquial_to_formal
        formal = formal_map.get(word)
        if formal is None:
            formal = formal_map.get(lower)
        if formal is not None:
            self._record(result, word, formal, CorrectionKind.DIGLOSSIA, 1.0)
            return formal

        if contains_tamil(word):
            match, score = self._matcher.closest(word, self._threshold)
            if match != word and score >= self._threshold:
                self._record(result, word, match, CorrectionKind.ASR_ERROR, score)
                return match

        return word

    def _record(
        self,
        result: LinguisticResult,
        original: str,
        corrected: str,
        kind: CorrectionKind,
        confidence: float,
    ) -> None:
        result.corrections.append(
            Correction(original=original, corrected=corrected, kind=kind, confidence=confidence)
        )
        if original != corrected:
            self._logger.debug(f"[{kind.value}] '{original}' -> '{corrected}' (Score: {confidence:.3f})")
        self._emit({
            "type": "correction",
            "engine": "tamil",
            "original": original,
            "replacement": corrected,
            "kind": kind.value,
            "score": confidence,
        })

    def _check_orthography(self, word: str, result: LinguisticResult) -> None:
        for issue in validate_orthography(word):
            result.orthography_issues.append(issue)
            self._logger.debug(f"[orthography] {issue}")
            self._emit({
                "type": "orthography",
                "engine": "tamil",
                "word": issue.word,
                "issue": issue.kind,
                "position": issue.position,
            })

    def _emit(self, event: CorrectionEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event 回呼執行失敗")
