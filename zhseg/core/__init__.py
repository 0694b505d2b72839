"""
核心分词模块

- char_util: 字符类型识别与规范化
- SortedLinkedSet / LexemePath: 有序词元集合与候选切分路径
- Dictionary: 主词典、量词词典、停用词词典 Trie
- segmenters: 字母数字、数量词、中文词三个子分词器
- AnalyzeContext: 滑动缓冲区与结果输出
- Arbitrator: 歧义裁决
- SegmentPipeline: 分词会话
"""
from .char_util import CharType, char_type, normalize
from .lexeme import InvalidLexemeError, Lexeme, LexemeType
from .sorted_set import SortedLinkedSet
from .lexeme_path import LexemePath
from .dict_trie import Dictionary, DictNode, Hit
from .context import AnalyzeContext
from .arbitrator import Arbitrator
from .pipeline import SegmentPipeline, segment

__all__ = [
    "CharType",
    "char_type",
    "normalize",
    "InvalidLexemeError",
    "Lexeme",
    "LexemeType",
    "SortedLinkedSet",
    "LexemePath",
    "Dictionary",
    "DictNode",
    "Hit",
    "AnalyzeContext",
    "Arbitrator",
    "SegmentPipeline",
    "segment",
]
