"""
子分词器模块
"""
from typing import List

from zhseg.core.segmenters.base import BaseSegmenter, CharRun, RunState, SegmenterId
from zhseg.core.segmenters.cjk import CJKSegmenter
from zhseg.core.segmenters.letter import LetterSegmenter
from zhseg.core.segmenters.quantifier import CNQuantifierSegmenter


def create_segmenters() -> List[BaseSegmenter]:
    """按固定顺序创建一组子分词器：字母数字、数量词、中文词"""
    return [LetterSegmenter(), CNQuantifierSegmenter(), CJKSegmenter()]


__all__ = [
    "BaseSegmenter",
    "CharRun",
    "RunState",
    "SegmenterId",
    "CJKSegmenter",
    "LetterSegmenter",
    "CNQuantifierSegmenter",
    "create_segmenters",
]
