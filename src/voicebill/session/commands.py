"""
語音指令解析（刪除 / 清除）

    "clear list" / "முழுவதும்"        -> clear-all
    "delete last" / "கடைசி"           -> delete-last
    "delete item 3" / "நீக்கு 2"       -> delete-index
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern

from voicebill.core.lexicon import Lexicon, LexiconPatterns


class CommandKind(Enum):
    CLEAR_ALL = "clear-all"
    DELETE_LAST = "delete-last"
    DELETE_INDEX = "delete-index"


@dataclass(frozen=True)
class VoiceCommand:
    """
    語音指令

    Attributes:
        kind: 指令類型
        index: DELETE_INDEX 的目標序號（從 1 開始），其他指令為 None
    """
    kind: CommandKind
    index: Optional[int] = None


CLEAR_ALL_PHRASES = ("clear list", "clear all", "reset list", "முழுவதும்", "அழி")
DELETE_LAST_PHRASES = ("delete last", "remove last", "undo last", "கடைசி", "முந்தைய")


def _phrase_pattern(phrases) -> Pattern[str]:
    alternation = "|".join(re.escape(p) for p in sorted(phrases, key=len, reverse=True))
    return re.compile(rf"(?<!\S)(?:{alternation})(?!\S)")


_CLEAR_ALL = _phrase_pattern(CLEAR_ALL_PHRASES)
_DELETE_LAST = _phrase_pattern(DELETE_LAST_PHRASES)

# 指令詞必須是獨立 token；"item number 4" 從 "item" 開始整段吃下
_DELETE_INDEX = re.compile(
    r"(?<!\S)(?:delete|remove|item|number|no\.?|நீக்கு|அழி)\s*"
    r"(?:item\s*)?(?:number\s*|no\.?\s*)?(\d{1,3})(?!\d)"
)


def _is_quantity_or_price(text: str, match: re.Match, patterns: LexiconPatterns) -> bool:
    """指令片段能被解析成數量或價格時不算指令（"banana number 12"、"delete 2 kg" 都是品項）"""
    if patterns.quantity_before.match(text, match.start()):
        return True
    index_pos = match.start(1)
    return bool(
        patterns.quantity_after.match(text, index_pos)
        or patterns.price_after.match(text, index_pos)
    )


def parse_voice_command(text: Optional[str], lexicon: Optional[Lexicon] = None) -> Optional[VoiceCommand]:
    """
    偵測轉錄文字中的刪除 / 清除指令

    優先順序：clear-all > delete-last > delete-index。
    指令詞只以完整 token 比對；會被解析成數量或價格的片段不視為指令。

    Args:
        text: 轉錄文字
        lexicon: 用來辨識數量 / 價格的詞庫，預設為 Lexicon.default()

    Returns:
        VoiceCommand 或 None（不是指令）
    """
    if not text:
        return None

    lowered = text.lower()

    if _CLEAR_ALL.search(lowered):
        return VoiceCommand(CommandKind.CLEAR_ALL)

    if _DELETE_LAST.search(lowered):
        return VoiceCommand(CommandKind.DELETE_LAST)

    patterns = (lexicon or Lexicon.default()).patterns
    for match in _DELETE_INDEX.finditer(lowered):
        if _is_quantity_or_price(lowered, match, patterns):
            continue
        index = int(match.group(1))
        if index > 0:
            return VoiceCommand(CommandKind.DELETE_INDEX, index=index)

    return None
