"""
子分词器测试
"""
import io

from zhseg.core.context import AnalyzeContext
from zhseg.core.lexeme import LexemeType
from zhseg.core.segmenters import (
    CharRun,
    CJKSegmenter,
    CNQuantifierSegmenter,
    LetterSegmenter,
    RunState,
    SegmenterId,
    create_segmenters,
)


def scan(segmenter, text, dictionary):
    """用单个子分词器扫描一段短文本，返回原始词元 (begin, length, type)"""
    context = AnalyzeContext(dictionary)
    context.fill_buffer(io.StringIO(text))
    context.init_cursor()
    while True:
        segmenter.analyze(context)
        if not context.move_cursor():
            break
    return [(lex.begin, lex.length, lex.lexeme_type) for lex in context.raw_lexemes]


class TestCharRun:
    """连续字符段状态测试"""

    def test_lifecycle(self):
        """测试 IDLE → ACCUMULATING → CLOSED → IDLE"""
        run = CharRun()
        assert run.state is RunState.IDLE
        run.open(2)
        run.extend(4)
        assert run.is_open
        assert run.close() == (2, 3)
        assert run.state is RunState.CLOSED
        run.settle()
        assert run.state is RunState.IDLE


class TestLetterSegmenter:
    """英文数字分词器测试"""

    def test_mixed_run(self, dictionary):
        """测试字母数字混合：同时输出混合段、纯字母段、纯数字段"""
        result = scan(LetterSegmenter(), "iphone15", dictionary)
        assert result == [
            (0, 8, LexemeType.LETTER),
            (0, 6, LexemeType.ENGLISH),
            (6, 2, LexemeType.ARABIC),
        ]

    def test_decimal(self, dictionary):
        """测试小数：与之重合的混合段被去重"""
        assert scan(LetterSegmenter(), "3.14", dictionary) == [(0, 4, LexemeType.ARABIC)]

    def test_thousands_separator(self, dictionary):
        """测试千分位分隔符不打断数字"""
        result = scan(LetterSegmenter(), "1,000", dictionary)
        assert (0, 5, LexemeType.ARABIC) in result

    def test_trailing_connector(self, dictionary):
        """测试末尾连接符不计入词元"""
        assert scan(LetterSegmenter(), "abc.", dictionary) == [(0, 3, LexemeType.ENGLISH)]

    def test_email(self, dictionary):
        """测试连接符连接的混合段"""
        result = scan(LetterSegmenter(), "a@b.com", dictionary)
        assert result[0] == (0, 7, LexemeType.LETTER)
        assert (4, 3, LexemeType.ENGLISH) in result

    def test_separated_words(self, dictionary):
        """测试空格分开的英文单词"""
        assert scan(LetterSegmenter(), "hello world", dictionary) == [
            (0, 5, LexemeType.ENGLISH),
            (6, 5, LexemeType.ENGLISH),
        ]

    def test_lock_while_open(self, dictionary):
        """测试字符段未结束时锁定缓冲区"""
        context = AnalyzeContext(dictionary)
        context.fill_buffer(io.StringIO("ab 中"))
        context.init_cursor()
        segmenter = LetterSegmenter()

        segmenter.analyze(context)
        assert context.is_buffer_locked()
        context.move_cursor()
        context.move_cursor()
        segmenter.analyze(context)
        assert not context.is_buffer_locked()


class TestCNQuantifierSegmenter:
    """中文数量词分词器测试"""

    def test_numeral_run(self, dictionary):
        """测试连续中文数词输出为一个词元"""
        result = scan(CNQuantifierSegmenter(), "一百二十", dictionary)
        assert (0, 4, LexemeType.CNUM) in result

    def test_numeral_and_quantifier(self, dictionary):
        """测试数词后紧跟量词"""
        assert scan(CNQuantifierSegmenter(), "三个", dictionary) == [
            (0, 1, LexemeType.CNUM),
            (1, 1, LexemeType.COUNT),
        ]

    def test_quantifier_needs_numeral(self, dictionary):
        """测试没有数词时不识别量词"""
        assert scan(CNQuantifierSegmenter(), "他个", dictionary) == []

    def test_numeral_not_other_chars(self, dictionary):
        """测试数词段遇到非数词结束"""
        assert scan(CNQuantifierSegmenter(), "五本书", dictionary) == [(0, 1, LexemeType.CNUM)]


class TestCJKSegmenter:
    """中文词分词器测试"""

    def test_all_matches(self, dictionary):
        """测试输出所有词典匹配"""
        result = scan(CJKSegmenter(), "中华人民共和国", dictionary)
        assert result == [
            (0, 7, LexemeType.CNWORD),
            (0, 2, LexemeType.CNWORD),
            (2, 2, LexemeType.CNWORD),
            (4, 3, LexemeType.CNWORD),
        ]

    def test_useless_breaks_match(self, dictionary):
        """测试无用字符打断匹配"""
        assert scan(CJKSegmenter(), "中，华", dictionary) == []

    def test_lock_while_prefix(self, dictionary):
        """测试存在前缀匹配时锁定缓冲区"""
        context = AnalyzeContext(dictionary)
        context.fill_buffer(io.StringIO("中华x"))
        context.init_cursor()
        segmenter = CJKSegmenter()

        segmenter.analyze(context)
        assert context.is_buffer_locked()
        context.move_cursor()
        segmenter.analyze(context)
        assert context.is_buffer_locked()
        context.move_cursor()
        segmenter.analyze(context)
        assert not context.is_buffer_locked()


class TestCreateSegmenters:
    """子分词器组合测试"""

    def test_order_and_ids(self):
        """测试固定顺序与互不重复的锁位"""
        segmenters = create_segmenters()
        assert [type(s) for s in segmenters] == [
            LetterSegmenter, CNQuantifierSegmenter, CJKSegmenter
        ]
        ids = [s.segmenter_id for s in segmenters]
        assert ids == [SegmenterId.LETTER, SegmenterId.CN_QUANTIFIER, SegmenterId.CJK]
        assert len(set(ids)) == 3
