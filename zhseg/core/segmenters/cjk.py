"""
中日韩词子分词器：在主词典上做最长匹配
"""
from typing import List

from zhseg.core.char_util import CharType
from zhseg.core.dict_trie import Hit
from zhseg.core.lexeme import LexemeType
from .base import BaseSegmenter, SegmenterId


class CJKSegmenter(BaseSegmenter):
    """中文词分词器"""

    segmenter_id = SegmenterId.CJK

    def __init__(self):
        self._hits: List[Hit] = []

    def analyze(self, context):
        if context.current_char_type != CharType.USELESS:
            single_hit = context.dictionary.match_main(context.buffer, context.cursor, 1)
            self._hits = self._scan_hits(context, self._hits, single_hit, LexemeType.CNWORD)
        else:
            # 遇到无用字符，所有未完成的匹配都不可能再成词
            self._hits = []

        if context.is_buffer_consumed():
            self._hits = []

        self._update_lock(context, bool(self._hits))

    def reset(self):
        self._hits = []
