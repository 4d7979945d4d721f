"""
解析模組

- NumberNormalizer: 轉錄前處理與口語數字正規化
- SegmentParser: 單一片段 -> ParsedItem
- StreamSegmenter: 完整轉錄 -> 有序 ParsedItem 列表
"""

from .numbers import NumberNormalizer, format_number
from .segment_parser import SegmentParser
from .segmenter import Segment, StreamSegmenter

__all__ = [
    "NumberNormalizer",
    "SegmentParser",
    "StreamSegmenter",
    "Segment",
    "format_number",
]
