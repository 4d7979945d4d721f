"""
泰米爾字元分類與正字法檢查

正字法檢查只產生診斷，不會改動文字：
- 詞首不應是 mei (子音 + pulli)
- 獨立母音 (uyir) 出現在詞中通常代表 ASR 斷詞錯誤
"""

from typing import List

from voicebill.core.models import OrthographyIssue

from .config import TamilLinguisticConfig


def is_tamil_char(char: str) -> bool:
    if not char:
        return False
    code = ord(char[0])
    return TamilLinguisticConfig.UNICODE_START <= code <= TamilLinguisticConfig.UNICODE_END


def contains_tamil(text: str) -> bool:
    return any(is_tamil_char(ch) for ch in text or "")


def is_uyir(char: str) -> bool:
    return char in TamilLinguisticConfig.UYIR_VOWELS


def is_mei(chars: str) -> bool:
    return len(chars) == 2 and chars in TamilLinguisticConfig.MEI_CONSONANTS


def starts_with_mei(word: str) -> bool:
    if len(word) < 2 or word[1] != TamilLinguisticConfig.PULLI:
        return False
    return is_mei(word[:2])


def validate_orthography(word: str) -> List[OrthographyIssue]:
    """
    檢查單一詞的正字法

    Args:
        word: 待檢查的詞（非泰米爾詞直接通過）

    Returns:
        List[OrthographyIssue]: 診斷列表，空列表表示沒有問題
    """
    if not contains_tamil(word):
        return []

    issues: List[OrthographyIssue] = []
    if starts_with_mei(word):
        issues.append(OrthographyIssue(word=word, kind="mei_start", position=0))

    for idx in range(1, len(word) - 1):
        if is_uyir(word[idx]):
            issues.append(OrthographyIssue(word=word, kind="medial_uyir", position=idx))

    return issues
