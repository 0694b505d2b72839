"""
zhseg - 中文细粒度 / 智能分词引擎
"""
from zhseg.core import Dictionary, Lexeme, LexemeType, SegmentPipeline, segment

__version__ = "1.0.0"

__all__ = [
    "Dictionary",
    "Lexeme",
    "LexemeType",
    "SegmentPipeline",
    "segment",
    "__version__",
]
