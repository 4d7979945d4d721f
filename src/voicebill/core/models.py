"""
資料模型

解析管線對外輸出的結構（統一格式）：
- ParsedItem: 一個品項的解析結果（名稱 / 數量 / 單價）
- Correction: formalizer 每一次替換的紀錄
- OrthographyIssue: 正字法診斷（僅供參考，不影響輸出）
- LinguisticResult: formalizer 的完整處理報告
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ParsedItem:
    """
    單一品項的解析結果

    Attributes:
        name: 正規化後的品名；找不到任何名稱 token 時為 None
        quantity: 原始形式的數量字串，例如 "2 kg"、"அரை கிலோ"；找不到時為 None
        rate: **單位**價格 (說出的總價 ÷ 數量)；沒有價格時為 None

    欄位以 None 表示「未知」，與明確的 0 區分開來，
    讓 UI 可以分辨「還在聽」與「已經說完」。

    範例：
        >>> item = ParsedItem(name="Tomato", quantity="2 kg", rate=25.0)
        >>> item.fingerprint()
        ('Tomato', '2 kg', 25.0)
    """
    name: Optional[str] = None
    quantity: Optional[str] = None
    rate: Optional[float] = None

    def is_empty(self) -> bool:
        return self.name is None and self.quantity is None and self.rate is None

    def has_name_or_quantity(self) -> bool:
        return self.name is not None or self.quantity is not None

    def fingerprint(self) -> Tuple[str, str, float]:
        """穩定指紋 (name, quantity, rate)，供呼叫端做去重"""
        return (self.name or "", self.quantity or "", self.rate or 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class CorrectionKind(Enum):
    """修正來源類型"""
    DIGLOSSIA = "diglossia"            # 口語 -> 書面語
    ASR_ERROR = "asr_error"            # 詞庫模糊比對
    NORMALIZATION = "normalization"    # Unicode / 空白 / 標點正規化


@dataclass
class Correction:
    """
    單一修正紀錄

    Attributes:
        original: 原始 token
        corrected: 修正後 token
        kind: 修正來源
        confidence: 置信度 (0.0-1.0)，diglossia 固定為 1.0，模糊修正為相似度
    """
    original: str
    corrected: str
    kind: CorrectionKind
    confidence: float = 1.0

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")


@dataclass
class OrthographyIssue:
    """
    正字法診斷

    Attributes:
        word: 被標記的詞
        kind: "mei_start" (以 mei 子音開頭) 或 "medial_uyir" (詞中出現獨立母音)
        position: 問題字元的位置 (code point index)
    """
    word: str
    kind: str
    position: int = 0

    def __str__(self) -> str:
        if self.kind == "mei_start":
            return f"Word starts with mei consonant: {self.word}"
        return f"Standalone uyir in middle of word at position {self.position}: {self.word[self.position]}"


@dataclass
class LinguisticResult:
    """formalizer 的完整處理報告"""
    original_text: str
    processed_text: str
    corrections: List[Correction] = field(default_factory=list)
    orthography_issues: List[OrthographyIssue] = field(default_factory=list)
    contains_tamil: bool = False
