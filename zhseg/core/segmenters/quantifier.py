"""
中文数量词子分词器

- 中文数词：连续的数词字符（一二三、壹贰叁、百千万……）输出为一个数词
- 中文量词：在量词词典上做最长匹配，只在紧跟数词（中文数词或阿拉伯数字）时才扫描
"""
from typing import List

from zhseg.core.char_util import CharType
from zhseg.core.dict_trie import Hit
from zhseg.core.lexeme import LexemeType
from .base import BaseSegmenter, CharRun, SegmenterId

CN_NUMERALS = frozenset("○〇一二三四五六七八九十百千万亿零壹贰叁肆伍陆柒捌玖拾佰仟萬億兆卅廿")


class CNQuantifierSegmenter(BaseSegmenter):
    """中文数量词分词器"""

    segmenter_id = SegmenterId.CN_QUANTIFIER

    def __init__(self):
        self._numeral = CharRun()
        self._hits: List[Hit] = []

    def analyze(self, context):
        # 先扫描量词：数词段是否"已经开始"要以处理当前字符之前的状态为准
        self._process_quantifier(context)
        self._process_numeral(context)
        self._update_lock(context, self._numeral.is_open or bool(self._hits))

    def _is_numeral(self, context) -> bool:
        return (context.current_char_type == CharType.CHINESE
                and context.current_char in CN_NUMERALS)

    def _process_numeral(self, context):
        run = self._numeral
        run.settle()

        if not run.is_open:
            if self._is_numeral(context):
                run.open(context.cursor)
        elif self._is_numeral(context):
            run.extend(context.cursor)
        else:
            self._emit_numeral(context)

        if context.is_buffer_consumed() and run.is_open:
            self._emit_numeral(context)

    def _emit_numeral(self, context):
        begin, length = self._numeral.close()
        context.add_lexeme(context.new_lexeme(begin, length, LexemeType.CNUM))

    def _process_quantifier(self, context):
        if not self._need_quantifier_scan(context):
            return

        if context.current_char_type == CharType.CHINESE:
            single_hit = context.dictionary.match_quantifier(context.buffer, context.cursor, 1)
            self._hits = self._scan_hits(context, self._hits, single_hit, LexemeType.COUNT)
        else:
            # 非中文字符不可能再构成量词
            self._hits = []

        if context.is_buffer_consumed():
            self._hits = []

    def _need_quantifier_scan(self, context) -> bool:
        """正在处理数词、有未完成的量词，或前一个词元是紧挨着的数词时才需要扫描量词"""
        if self._numeral.is_open or self._hits:
            return True

        last = context.raw_lexemes.peek_last()
        if last is not None and last.lexeme_type in (LexemeType.CNUM, LexemeType.ARABIC):
            return last.end == context.cursor
        return False

    def reset(self):
        self._numeral.reset()
        self._hits = []
