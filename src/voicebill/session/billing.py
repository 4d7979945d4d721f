"""
帳單 session（呼叫端持有的狀態）

解析核心是無狀態的：每次轉錄更新都會回傳「完整轉錄」的所有品項。
BillingSession 負責記錄哪些品項已經自動確認過，避免同一個品項重複加入帳單。

使用方式:
    session = BillingSession()
    session.update("tomato 2 kg 50 rupees")      # 確認 Tomato
    session.update("tomato 2 kg 50 rupees onion")  # Tomato 不會重複，Onion 為 live
    session.end_listening()                       # live 品項（有品名者）轉為確認
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from voicebill.core.models import ParsedItem
from voicebill.engine import BillingEngine, get_default_engine
from voicebill.languages.tamil.config import TamilLinguisticConfig
from voicebill.utils.logger import get_logger

from .commands import CommandKind, VoiceCommand, parse_voice_command

UNKNOWN_ITEM_NAME = "Unknown Item"

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_quantity_number(quantity: Optional[str]) -> float:
    """
    取出數量字串開頭的數值

        "2 kg" -> 2.0, "1.5 லிட்டர்" -> 1.5, "அரை கிலோ" -> 0.5, "" -> 1.0
    """
    if not quantity:
        return 1.0

    match = _LEADING_NUMBER.match(quantity)
    if match:
        return float(match.group(1))

    head = quantity.split()[0] if quantity.split() else ""
    return float(TamilLinguisticConfig.FRACTION_WORDS.get(head, 1.0))


@dataclass
class BillItem:
    """
    帳單上的一行

    Attributes:
        name: 品名
        quantity: 數量字串（例如 "2 kg"）
        rate: 單價
        total: 小計 = 單價 × 數量數值
        is_live: 是否為尚未確認的 live 品項
        id: 唯一識別碼
    """
    name: str
    quantity: str
    rate: float = 0.0
    total: float = 0.0
    is_live: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_parsed(cls, parsed: ParsedItem, *, include_price: bool = True, is_live: bool = True) -> "BillItem":
        rate = (parsed.rate or 0.0) if include_price else 0.0
        return cls(
            name=parsed.name or "",
            quantity=parsed.quantity or "",
            rate=rate,
            total=rate * parse_quantity_number(parsed.quantity),
            is_live=is_live,
        )

    def fingerprint(self) -> Tuple[str, str, float]:
        return (self.name, self.quantity, self.rate)


@dataclass
class SessionUpdate:
    """一次 update() 的結果"""
    committed: List[BillItem] = field(default_factory=list)
    live: List[BillItem] = field(default_factory=list)
    command: Optional[VoiceCommand] = None


class BillingSession:
    """
    一次語音輸入 session 的帳單狀態

    - 有品名且有數量的品項自動確認，指紋 (name, quantity, rate) 相同者只確認一次
    - 其他品項以 live 顯示
    - 語音指令會修改已確認列表並重置指紋
    - 已被指令消耗的轉錄前綴，之後的 update() 不會再解析
    """

    def __init__(self, engine: Optional[BillingEngine] = None, include_price: Optional[bool] = None):
        self._engine = engine or get_default_engine()
        if include_price is None:
            include_price = self._engine.config.include_price
        self._include_price = include_price

        self._confirmed: List[BillItem] = []
        self._live: List[BillItem] = []
        self._committed_keys: Set[Tuple[str, str, float]] = set()
        self._consumed_prefix = ""
        self._logger = get_logger("session")

    @property
    def confirmed_items(self) -> List[BillItem]:
        return list(self._confirmed)

    @property
    def live_items(self) -> List[BillItem]:
        return list(self._live)

    @property
    def grand_total(self) -> float:
        return sum(item.total for item in self._confirmed)

    def update(self, transcript: Optional[str]) -> SessionUpdate:
        """
        處理一次轉錄更新（完整轉錄，非增量）

        Returns:
            SessionUpdate: 本次新確認的品項、目前 live 品項、偵測到的指令
        """
        text = transcript or ""
        if self._consumed_prefix and text.startswith(self._consumed_prefix):
            text = text[len(self._consumed_prefix):]

        if not text.strip():
            self._live = []
            return SessionUpdate()

        command = parse_voice_command(text, self._engine.lexicon)
        if command is not None:
            self._apply_command(command)
            self._live = []
            self._committed_keys.clear()
            self._consumed_prefix = transcript or ""
            return SessionUpdate(command=command)

        committed: List[BillItem] = []
        live: List[BillItem] = []
        for parsed in self._engine.parse_continuous_input(text):
            item = BillItem.from_parsed(parsed, include_price=self._include_price)
            if parsed.name and parsed.quantity:
                key = item.fingerprint()
                if key not in self._committed_keys:
                    self._committed_keys.add(key)
                    committed.append(self._commit(item))
            else:
                live.append(item)

        self._live = live
        return SessionUpdate(committed=committed, live=list(live))

    def end_listening(self) -> List[BillItem]:
        """語音輸入結束：有品名的 live 品項轉為確認，並重置 session 追蹤"""
        committed = [self._commit(item) for item in self._live if item.name]
        self._live = []
        self._committed_keys.clear()
        self._consumed_prefix = ""
        return committed

    def clear(self) -> None:
        self._confirmed = []
        self._live = []
        self._committed_keys.clear()
        self._consumed_prefix = ""

    def _commit(self, item: BillItem) -> BillItem:
        confirmed = BillItem(
            name=item.name or UNKNOWN_ITEM_NAME,
            quantity=item.quantity,
            rate=item.rate,
            total=item.total,
            is_live=False,
        )
        self._confirmed.append(confirmed)
        self._logger.debug(f"[Session] 確認品項: {confirmed.name} {confirmed.quantity} @ {confirmed.rate}")
        return confirmed

    def _apply_command(self, command: VoiceCommand) -> None:
        self._logger.debug(f"[Session] 語音指令: {command.kind.value}")
        if command.kind is CommandKind.CLEAR_ALL:
            self._confirmed = []
        elif command.kind is CommandKind.DELETE_LAST:
            if self._confirmed:
                self._confirmed.pop()
        elif command.kind is CommandKind.DELETE_INDEX:
            position = command.index - 1
            if 0 <= position < len(self._confirmed):
                del self._confirmed[position]
