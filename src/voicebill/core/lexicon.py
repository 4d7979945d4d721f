"""
詞庫與關鍵字模式

把各語言 config 的靜態表格組裝成一個不可變的 `Lexicon`，並把所有
「長詞優先」的關鍵字 alternation 只編譯一次（`Lexicon.patterns`）。

Lexicon 由呼叫端注入到 parser / formalizer，而不是被當成環境全域變數引用，
因此可以替換語系或在測試中使用替代詞庫：

    from dataclasses import replace
    from voicebill.core.lexicon import Lexicon

    custom = replace(Lexicon.default(), item_names=("tomato", "potato"))
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cached_property, lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Pattern, Tuple

from voicebill.languages.english.config import EnglishBillingConfig
from voicebill.languages.tamil.config import TamilLinguisticConfig
from voicebill.utils.aho_corasick import AhoCorasick

NUMBER_PATTERN = r"\d+(?:\.\d+)?"
TAMIL_RANGE = "\u0B80-\u0BFF"

# 關鍵字前後不可緊貼拉丁字母或泰米爾字元
KEYWORD_START = rf"(?<![a-z{TAMIL_RANGE}])"
KEYWORD_END = rf"(?![a-z{TAMIL_RANGE}])"


def keyword_alternation(keywords: Iterable[str]) -> str:
    """去重後依長度降序排列並跳脫，組成 regex alternation（同長度保持原順序）"""
    unique = list(dict.fromkeys(k.lower() for k in keywords if k))
    unique.sort(key=len, reverse=True)
    return "|".join(re.escape(k) for k in unique)


@dataclass(frozen=True)
class LexiconPatterns:
    """由 Lexicon 編譯出來的所有正規表達式（每個 Lexicon 只建一次）"""
    number_words: Pattern[str]
    rate_correction: Pattern[str]
    asr_correction: Pattern[str]
    quantity_after: Pattern[str]
    quantity_before: Pattern[str]
    fraction_quantity: Pattern[str]
    price_after: Pattern[str]
    price_before: Pattern[str]
    price_boundary: Pattern[str]
    item_names: AhoCorasick[str]


def _freeze_mapping(name: str, mapping: Mapping, *, lower_keys: bool = False) -> Mapping:
    frozen = {}
    for key, value in mapping.items():
        if not key or value is None or value == "":
            raise ValueError(f"{name}: empty entry {key!r} -> {value!r}")
        frozen[key.lower() if lower_keys else key] = value
    return MappingProxyType(frozen)


def _freeze_keywords(name: str, keywords: Iterable[str]) -> Tuple[str, ...]:
    frozen = tuple(keywords)
    if any(not k for k in frozen):
        raise ValueError(f"{name}: empty keyword")
    return frozen


@dataclass(frozen=True, eq=False)
class Lexicon:
    """
    不可變的詞庫組合

    Attributes:
        number_words: 口語數字 -> 數字字串 (泰米爾 + 英文，key 為小寫)
        quantity_keywords: 數量單位
        rate_keywords: 價格關鍵字
        rate_corrections: 數字之後的價格詞誤聽修正
        asr_corrections: 整詞 ASR 修正 (exact-match)
        colloquial_to_formal: diglossia 映射 (exact-match)
        grocery_lexicon: 模糊修正的比對語料 (宣告順序即 tie-break 順序)
        item_names: 備援切分用的已知品名
        preserved_words: code-mixing 保留的英文借詞
        fraction_words: 黏著單位的分數詞 -> 數值
        fraction_units: 分數詞後可接的單位
    """
    number_words: Mapping[str, str]
    quantity_keywords: Tuple[str, ...]
    rate_keywords: Tuple[str, ...]
    rate_corrections: Mapping[str, str] = field(default_factory=dict)
    asr_corrections: Mapping[str, str] = field(default_factory=dict)
    colloquial_to_formal: Mapping[str, str] = field(default_factory=dict)
    grocery_lexicon: Tuple[str, ...] = ()
    item_names: Tuple[str, ...] = ()
    preserved_words: frozenset = frozenset()
    fraction_words: Mapping[str, float] = field(default_factory=dict)
    fraction_units: Tuple[str, ...] = ()

    def __post_init__(self):
        setattr_ = object.__setattr__
        setattr_(self, "number_words", _freeze_mapping("number_words", self.number_words, lower_keys=True))
        setattr_(self, "rate_corrections", _freeze_mapping("rate_corrections", self.rate_corrections, lower_keys=True))
        setattr_(self, "asr_corrections", _freeze_mapping("asr_corrections", self.asr_corrections))
        setattr_(self, "colloquial_to_formal", _freeze_mapping("colloquial_to_formal", self.colloquial_to_formal))
        setattr_(self, "fraction_words", _freeze_mapping("fraction_words", self.fraction_words))
        setattr_(self, "quantity_keywords", _freeze_keywords("quantity_keywords", self.quantity_keywords))
        setattr_(self, "rate_keywords", _freeze_keywords("rate_keywords", self.rate_keywords))
        setattr_(self, "grocery_lexicon", _freeze_keywords("grocery_lexicon", self.grocery_lexicon))
        setattr_(self, "item_names", _freeze_keywords("item_names", self.item_names))
        setattr_(self, "fraction_units", _freeze_keywords("fraction_units", self.fraction_units))
        setattr_(self, "preserved_words", frozenset(w.lower() for w in self.preserved_words))

    @classmethod
    def default(cls) -> "Lexicon":
        """泰米爾 + 英文雜貨帳單的預設詞庫（每個 process 只建一次）"""
        return default_lexicon()

    @cached_property
    def patterns(self) -> LexiconPatterns:
        flags = re.IGNORECASE
        numbers = keyword_alternation(self.number_words)
        units = keyword_alternation(self.quantity_keywords)
        rates = keyword_alternation(self.rate_keywords)
        rate_fixes = keyword_alternation(self.rate_corrections)
        asr = keyword_alternation(self.asr_corrections)
        fractions = keyword_alternation(self.fraction_words)
        fraction_units = keyword_alternation(self.fraction_units)

        unit_group = rf"(?P<unit>{units})(?:s)?{KEYWORD_END}"
        rate_group = rf"(?P<keyword>{rates}){KEYWORD_END}"

        item_names: AhoCorasick[str] = AhoCorasick()
        for name in self.item_names:
            item_names.add(name.lower(), name)
        item_names.build()

        return LexiconPatterns(
            number_words=re.compile(rf"(?<!\S)(?:{numbers})(?!\S)", flags),
            rate_correction=re.compile(
                rf"(?P<number>{NUMBER_PATTERN})\s*(?P<keyword>{rate_fixes}){KEYWORD_END}", flags
            ),
            asr_correction=re.compile(rf"(?<!\S)(?:{asr})(?!\S)", flags),
            quantity_after=re.compile(rf"(?P<number>{NUMBER_PATTERN})\s*{unit_group}", flags),
            quantity_before=re.compile(rf"{KEYWORD_START}{unit_group}\s*(?P<number>{NUMBER_PATTERN})", flags),
            fraction_quantity=re.compile(
                rf"(?P<fraction>{fractions})\s*(?P<unit>{fraction_units}){KEYWORD_END}", flags
            ),
            price_after=re.compile(rf"(?P<number>{NUMBER_PATTERN})\s*{rate_group}", flags),
            price_before=re.compile(rf"{KEYWORD_START}{rate_group}\s*(?P<number>{NUMBER_PATTERN})", flags),
            price_boundary=re.compile(
                rf"{NUMBER_PATTERN}\s*(?:{rates}){KEYWORD_END}"
                rf"|{KEYWORD_START}(?:{rates}){KEYWORD_END}\s*{NUMBER_PATTERN}",
                flags,
            ),
            item_names=item_names,
        )

    @cached_property
    def formal_phrases(self) -> Tuple[Tuple[str, ...], ...]:
        """多詞書面語片語 (例如 "கோழி இறைச்சி")，依詞數降序"""
        phrases = {
            tuple(value.split())
            for value in list(self.colloquial_to_formal.values()) + list(self.grocery_lexicon)
            if len(value.split()) > 1
        }
        return tuple(sorted(phrases, key=lambda p: (-len(p), p)))


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    tamil = TamilLinguisticConfig
    english = EnglishBillingConfig
    return Lexicon(
        number_words={**tamil.NUMBER_WORDS, **english.NUMBER_WORDS},
        quantity_keywords=tuple(english.QUANTITY_KEYWORDS + tamil.QUANTITY_KEYWORDS),
        rate_keywords=tuple(english.RATE_KEYWORDS + tamil.RATE_KEYWORDS),
        rate_corrections={**english.RATE_CORRECTIONS, **tamil.RATE_CORRECTIONS},
        asr_corrections=dict(tamil.ASR_CORRECTIONS),
        colloquial_to_formal=dict(tamil.COLLOQUIAL_TO_FORMAL),
        grocery_lexicon=tuple(tamil.GROCERY_LEXICON),
        item_names=tuple(tamil.ITEM_NAMES + english.ITEM_NAMES),
        preserved_words=frozenset(english.PRESERVED_WORDS),
        fraction_words=dict(tamil.FRACTION_WORDS),
        fraction_units=tuple(tamil.FRACTION_UNITS),
    )
