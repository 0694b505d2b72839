"""
英文字母 / 阿拉伯数字子分词器

同时跟踪三种连续字符段：
- 纯英文字母
- 纯阿拉伯数字（数字间允许出现 , .）
- 字母数字混合（允许出现 # & + - . @ _ 等连接符）

纯字母/纯数字段先于混合段输出，混合段与之完全重合时会被原始词元集合去重
"""
from zhseg.core.char_util import CharType
from zhseg.core.lexeme import LexemeType
from .base import BaseSegmenter, CharRun, SegmenterId

# 字母间连接符
LETTER_CONNECTORS = frozenset("#&+-.@_")
# 数字间分隔符
NUM_CONNECTORS = frozenset(",.")


class LetterSegmenter(BaseSegmenter):
    """英文数字分词器"""

    segmenter_id = SegmenterId.LETTER

    def __init__(self):
        self._english = CharRun()
        self._arabic = CharRun()
        self._mix = CharRun()

    def analyze(self, context):
        # 三种字符段互不干扰，每次都要全部处理
        pending = self._process_english(context)
        pending = self._process_arabic(context) or pending
        pending = self._process_mix(context) or pending
        self._update_lock(context, pending)

    def _emit(self, context, run: CharRun, lexeme_type: LexemeType):
        begin, length = run.close()
        context.add_lexeme(context.new_lexeme(begin, length, lexeme_type))

    def _process_english(self, context) -> bool:
        run = self._english
        run.settle()
        is_english = context.current_char_type == CharType.ENGLISH

        if not run.is_open:
            if is_english:
                run.open(context.cursor)
        elif is_english:
            run.extend(context.cursor)
        else:
            self._emit(context, run, LexemeType.ENGLISH)

        if context.is_buffer_consumed() and run.is_open:
            self._emit(context, run, LexemeType.ENGLISH)
        return run.is_open

    def _process_arabic(self, context) -> bool:
        run = self._arabic
        run.settle()
        char_type = context.current_char_type

        if not run.is_open:
            if char_type == CharType.ARABIC:
                run.open(context.cursor)
        elif char_type == CharType.ARABIC:
            run.extend(context.cursor)
        elif char_type == CharType.USELESS and context.current_char in NUM_CONNECTORS:
            # 数字之间的分隔符，不结束数字段，也不计入结束位置
            pass
        else:
            self._emit(context, run, LexemeType.ARABIC)

        if context.is_buffer_consumed() and run.is_open:
            self._emit(context, run, LexemeType.ARABIC)
        return run.is_open

    def _process_mix(self, context) -> bool:
        run = self._mix
        run.settle()
        char_type = context.current_char_type
        is_alnum = char_type in (CharType.ARABIC, CharType.ENGLISH)

        if not run.is_open:
            if is_alnum:
                run.open(context.cursor)
        elif is_alnum:
            run.extend(context.cursor)
        elif char_type == CharType.USELESS and context.current_char in LETTER_CONNECTORS:
            pass
        else:
            self._emit(context, run, LexemeType.LETTER)

        if context.is_buffer_consumed() and run.is_open:
            self._emit(context, run, LexemeType.LETTER)
        return run.is_open

    def reset(self):
        self._english.reset()
        self._arabic.reset()
        self._mix.reset()
