"""
分词上下文

负责：
- 滑动字符缓冲区的填充、指针移动与字符规范化
- 子分词器对缓冲区的锁定（防止补充数据时截断正在匹配的词）
- 原始词元集合、歧义裁决后的路径表、最终结果队列
- 结果输出时的数量词合并与停用词过滤
"""
from collections import deque
from typing import Deque, Dict, List, Optional

from zhseg.log import get_logger
from .char_util import CharType, char_type, normalize
from .dict_trie import Dictionary
from .lexeme import Lexeme, LexemeType
from .lexeme_path import LexemePath
from .segmenters.base import SegmenterId
from .sorted_set import SortedLinkedSet

logger = get_logger(__name__)

# 默认缓冲区大小
BUFF_SIZE = 4096
# 缓冲区耗尽的临界值
BUFF_EXHAUST_CRITICAL = 100


class AnalyzeContext:
    """分词上下文，每个分词会话独占一个"""

    def __init__(self, dictionary: Dictionary, use_smart: bool = False,
                 buffer_size: int = BUFF_SIZE,
                 refill_margin: int = BUFF_EXHAUST_CRITICAL):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive: {buffer_size}")
        if not 2 <= refill_margin < buffer_size:
            raise ValueError(
                f"refill_margin must be in [2, buffer_size): {refill_margin}")

        self.dictionary = dictionary
        self.use_smart = use_smart
        self.buffer_size = buffer_size
        self.refill_margin = refill_margin
        self.reset()

    def reset(self):
        """清空全部状态，可以开始处理新的输入流"""
        self.buffer: List[str] = []
        self.char_types: List[CharType] = []
        self.buff_offset = 0
        self.cursor = 0
        self._available = 0
        self._capacity = self.buffer_size
        self._exhausted = False
        self._buff_locker = SegmenterId(0)

        self.raw_lexemes: SortedLinkedSet[Lexeme] = SortedLinkedSet(key=Lexeme.sort_key)
        self._path_map: Dict[int, LexemePath] = {}
        self._results: Deque[Lexeme] = deque()

    # ------------------------------------------------------------------ 缓冲区

    @property
    def current_char(self) -> str:
        return self.buffer[self.cursor]

    @property
    def current_char_type(self) -> CharType:
        return self.char_types[self.cursor]

    @property
    def available(self) -> int:
        return self._available

    def _read(self, reader, count: int) -> List[str]:
        data = reader.read(count) if count > 0 else ""
        if len(data) < count:
            self._exhausted = True
        return list(data)

    def fill_buffer(self, reader) -> int:
        """
        填充缓冲区

        首次填充直接读满；之后把尚未处理的尾部 [cursor + 1, available) 移到头部再读入新内容。
        返回本次填充后缓冲区中的有效字符数，<= 0 表示输入已经读完
        """
        if self._available > 0:
            tail = self.buffer[self.cursor + 1:self._available]
        else:
            tail = []

        self._capacity = self.buffer_size
        self.buffer = tail + self._read(reader, self._capacity - len(tail))
        self.char_types = [CharType.USELESS] * len(self.buffer)
        self._available = len(self.buffer)
        self.cursor = 0
        logger.debug("缓冲区填充: offset=%d, available=%d", self.buff_offset, self._available)
        return self._available

    def extend_buffer(self, reader) -> int:
        """
        在缓冲区尾部追加内容，已有内容与指针位置保持不变

        指针走到满载缓冲区的最后一个字符、而输入尚未读完时调用，
        保证跨越缓冲区边界的词不会被截断。返回追加的字符数
        """
        if self._exhausted:
            return 0
        data = self._read(reader, self.buffer_size)
        if data:
            self.buffer.extend(data)
            self.char_types.extend([CharType.USELESS] * len(data))
            self._available += len(data)
            self._capacity += self.buffer_size
            logger.debug("缓冲区扩展: available=%d", self._available)
        return len(data)

    def is_at_buffer_edge(self) -> bool:
        """指针位于最后一个字符，但输入流可能还有后续内容"""
        return self.cursor == self._available - 1 and not self._exhausted

    def init_cursor(self):
        """重置指针到缓冲区头部，并规范化首个字符"""
        self.cursor = 0
        self._normalize_current()

    def _normalize_current(self):
        char = normalize(self.buffer[self.cursor])
        self.buffer[self.cursor] = char
        self.char_types[self.cursor] = char_type(char)

    def move_cursor(self) -> bool:
        """指针后移一位，成功返回 True"""
        if self.cursor < self._available - 1:
            self.cursor += 1
            self._normalize_current()
            return True
        return False

    def lock_buffer(self, segmenter_id: SegmenterId):
        self._buff_locker |= segmenter_id

    def unlock_buffer(self, segmenter_id: SegmenterId):
        self._buff_locker &= ~segmenter_id

    def release_buffer(self):
        """释放全部子分词器对缓冲区的占用"""
        self._buff_locker = SegmenterId(0)

    def is_buffer_locked(self) -> bool:
        return bool(self._buff_locker)

    def is_buffer_consumed(self) -> bool:
        """指针位于最后一个字符，且输入流已经读完"""
        return self.cursor == self._available - 1 and self._exhausted

    def need_refill_buffer(self) -> bool:
        """缓冲区满载、指针进入临界区且没有子分词器占用缓冲区时，需要补充新数据"""
        return (
            self._available == self._capacity and
            self._available - self.refill_margin < self.cursor < self._available - 1 and
            not self.is_buffer_locked()
        )

    def update_offset(self):
        """本轮处理了 [0, cursor] 共 cursor + 1 个字符"""
        self.buff_offset += self.cursor + 1

    # ------------------------------------------------------------------ 词元

    def new_lexeme(self, begin: int, length: int, lexeme_type: LexemeType) -> Lexeme:
        return Lexeme(self.buff_offset, begin, length, lexeme_type)

    def add_lexeme(self, lexeme: Lexeme) -> bool:
        return self.raw_lexemes.insert(lexeme)

    def add_lexeme_path(self, path: Optional[LexemePath]):
        """登记歧义裁决后的路径，key 为路径起始位置"""
        if path is not None and len(path) > 0:
            self._path_map[path.begin] = path

    def output_to_result(self):
        """把 [0, cursor] 范围内的路径与单字输出到结果队列"""
        index = 0
        while index <= self.cursor:
            if self.char_types[index] == CharType.USELESS:
                index += 1
                continue

            path = self._path_map.get(index)
            if path is None:
                self._output_single_char(index)
                index += 1
                continue

            lexeme = path.poll_first()
            while lexeme is not None:
                self._results.append(lexeme)
                index = max(index, lexeme.end)
                lexeme = path.poll_first()
                if lexeme is not None:
                    # 路径内词元之间的空隙按单字输出
                    for gap in range(index, lexeme.begin):
                        if self.char_types[gap] != CharType.USELESS:
                            self._output_single_char(gap)
        self._path_map.clear()

    def _output_single_char(self, index: int):
        if self.char_types[index] == CharType.CHINESE:
            lexeme_type = LexemeType.CNCHAR
        else:
            lexeme_type = LexemeType.OTHER_CJK
        self._results.append(self.new_lexeme(index, 1, lexeme_type))

    def has_results(self) -> bool:
        return bool(self._results)

    def get_next_lexeme(self) -> Optional[Lexeme]:
        """
        取出下一个词元

        智能模式下先尝试数量词合并；停用词直接丢弃并继续取下一个
        """
        while self._results:
            lexeme = self._results.popleft()
            self._compound(lexeme)
            if self.dictionary.is_stopword(self.buffer, lexeme.begin, lexeme.length):
                continue
            lexeme.text = "".join(self.buffer[lexeme.begin:lexeme.end])
            return lexeme
        return None

    def _merge_next(self, lexeme: Lexeme, next_type: LexemeType,
                    merged_type: LexemeType) -> bool:
        if not self._results or self._results[0].lexeme_type != next_type:
            return False
        if lexeme.expand(self._results[0], merged_type):
            self._results.popleft()
            return True
        return False

    def _compound(self, lexeme: Lexeme):
        """数量词合并：阿拉伯数字 + 中文数词 / 量词，中文数词 + 量词"""
        if not self.use_smart:
            return

        if lexeme.lexeme_type == LexemeType.ARABIC:
            if not self._merge_next(lexeme, LexemeType.CNUM, LexemeType.CNUM):
                self._merge_next(lexeme, LexemeType.COUNT, LexemeType.CQUAN)

        # 可能存在第二轮合并
        if lexeme.lexeme_type == LexemeType.CNUM:
            self._merge_next(lexeme, LexemeType.COUNT, LexemeType.CQUAN)
