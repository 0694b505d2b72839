"""
分词上下文测试
"""
import io

import pytest

from zhseg.core.char_util import CharType
from zhseg.core.context import AnalyzeContext
from zhseg.core.segmenters import SegmenterId


class TestContextConfig:
    """上下文参数校验测试"""

    def test_invalid_buffer_size(self, dictionary):
        """测试缓冲区大小必须为正"""
        with pytest.raises(ValueError):
            AnalyzeContext(dictionary, buffer_size=0)

    def test_invalid_refill_margin(self, dictionary):
        """测试临界区必须小于缓冲区且不小于 2"""
        with pytest.raises(ValueError):
            AnalyzeContext(dictionary, buffer_size=8, refill_margin=8)
        with pytest.raises(ValueError):
            AnalyzeContext(dictionary, buffer_size=8, refill_margin=1)


class TestBuffer:
    """缓冲区管理测试"""

    def test_fill_short_input(self, dictionary):
        """测试输入短于缓冲区时一次读完"""
        context = AnalyzeContext(dictionary, buffer_size=8, refill_margin=3)
        assert context.fill_buffer(io.StringIO("abc")) == 3
        context.cursor = 2
        assert context.is_buffer_consumed()

    def test_fill_empty_input(self, dictionary):
        """测试空输入"""
        context = AnalyzeContext(dictionary)
        assert context.fill_buffer(io.StringIO("")) == 0

    def test_refill_moves_tail(self, dictionary):
        """测试再次填充时未处理的尾部移到头部"""
        context = AnalyzeContext(dictionary, buffer_size=4, refill_margin=2)
        reader = io.StringIO("abcdefghij")
        assert context.fill_buffer(reader) == 4
        context.cursor = 1
        assert context.fill_buffer(reader) == 4
        assert context.buffer == list("cdef")
        assert context.cursor == 0

    def test_extend_buffer(self, dictionary):
        """测试在尾部追加内容直到输入读完"""
        context = AnalyzeContext(dictionary, buffer_size=4, refill_margin=2)
        reader = io.StringIO("abcdefghij")
        context.fill_buffer(reader)
        context.cursor = 3
        assert context.is_at_buffer_edge()
        assert context.extend_buffer(reader) == 4
        assert context.available == 8
        assert context.extend_buffer(reader) == 2
        assert context.available == 10
        assert context.extend_buffer(reader) == 0
        context.cursor = 9
        assert not context.is_at_buffer_edge()
        assert context.is_buffer_consumed()

    def test_cursor_normalizes(self, dictionary):
        """测试指针移动时规范化并识别字符类型"""
        context = AnalyzeContext(dictionary)
        context.fill_buffer(io.StringIO("Ａ中，"))
        context.init_cursor()
        assert context.current_char == "a"
        assert context.current_char_type == CharType.ENGLISH
        assert context.move_cursor()
        assert context.current_char_type == CharType.CHINESE
        assert context.move_cursor()
        assert context.current_char == ","
        assert context.current_char_type == CharType.USELESS
        assert not context.move_cursor()


class TestRefill:
    """补充数据时机测试"""

    def setup_method(self):
        self.reader = io.StringIO("a" * 20)

    def test_need_refill_in_margin(self, dictionary):
        """测试指针进入临界区时需要补充数据"""
        context = AnalyzeContext(dictionary, buffer_size=8, refill_margin=3)
        context.fill_buffer(self.reader)
        context.cursor = 4
        assert not context.need_refill_buffer()
        context.cursor = 6
        assert context.need_refill_buffer()
        context.cursor = 7
        assert not context.need_refill_buffer()

    def test_lock_defers_refill(self, dictionary):
        """测试子分词器锁定时推迟补充数据"""
        context = AnalyzeContext(dictionary, buffer_size=8, refill_margin=3)
        context.fill_buffer(self.reader)
        context.cursor = 6
        context.lock_buffer(SegmenterId.CJK)
        context.lock_buffer(SegmenterId.LETTER)
        assert not context.need_refill_buffer()
        context.unlock_buffer(SegmenterId.CJK)
        assert context.is_buffer_locked()
        context.unlock_buffer(SegmenterId.LETTER)
        assert context.need_refill_buffer()

    def test_release_buffer(self, dictionary):
        """测试释放全部锁"""
        context = AnalyzeContext(dictionary)
        context.lock_buffer(SegmenterId.CN_QUANTIFIER)
        context.release_buffer()
        assert not context.is_buffer_locked()

    def test_partial_buffer_never_refills(self, dictionary):
        """测试缓冲区未满（输入已读完）时不需要补充数据"""
        context = AnalyzeContext(dictionary, buffer_size=8, refill_margin=3)
        context.fill_buffer(io.StringIO("abcdef"))
        context.cursor = 4
        assert not context.need_refill_buffer()

    def test_update_offset(self, dictionary):
        """测试偏移量按已处理字符数推进"""
        context = AnalyzeContext(dictionary, buffer_size=8, refill_margin=3)
        context.fill_buffer(self.reader)
        context.cursor = 6
        context.update_offset()
        assert context.buff_offset == 7
