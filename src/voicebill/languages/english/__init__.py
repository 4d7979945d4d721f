"""
英文模組

提供英文口語數字、單位、價格關鍵字與 code-mixing 借詞白名單。

主要類別:
- EnglishBillingConfig: 英文靜態表格
"""

from .config import EnglishBillingConfig

__all__ = ["EnglishBillingConfig"]
