"""
Session 模組（呼叫端持有的帳單狀態，不屬於無狀態解析核心）
"""

from .billing import BillItem, BillingSession, SessionUpdate, parse_quantity_number
from .commands import CommandKind, VoiceCommand, parse_voice_command

__all__ = [
    "BillItem",
    "BillingSession",
    "SessionUpdate",
    "parse_quantity_number",
    "CommandKind",
    "VoiceCommand",
    "parse_voice_command",
]
