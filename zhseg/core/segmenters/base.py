"""
子分词器基类
"""
from abc import ABC, abstractmethod
from enum import Enum, IntFlag
from typing import TYPE_CHECKING, List, Optional, Tuple

from zhseg.core.dict_trie import Hit
from zhseg.core.lexeme import LexemeType

if TYPE_CHECKING:
    from zhseg.core.context import AnalyzeContext


class SegmenterId(IntFlag):
    """子分词器标识，同时作为缓冲区锁位图中的一位"""
    LETTER = 0x01
    CN_QUANTIFIER = 0x02
    CJK = 0x04


class RunState(Enum):
    """连续字符段的扫描状态"""
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    CLOSED = "closed"


class CharRun:
    """
    连续字符段跟踪器

    start 为首字符位置，end 为最后一个有效字符位置（均含）。
    close() 后状态变为 CLOSED，下一次 open/step 前回到 IDLE
    """

    __slots__ = ("state", "start", "end")

    def __init__(self):
        self.reset()

    @property
    def is_open(self) -> bool:
        return self.state is RunState.ACCUMULATING

    def open(self, position: int):
        self.state = RunState.ACCUMULATING
        self.start = self.end = position

    def extend(self, position: int):
        self.end = position

    def close(self) -> Tuple[int, int]:
        """结束当前字符段，返回 (start, length)"""
        span = (self.start, self.end - self.start + 1)
        self.state = RunState.CLOSED
        self.start = self.end = -1
        return span

    def settle(self):
        if self.state is RunState.CLOSED:
            self.state = RunState.IDLE

    def reset(self):
        self.state = RunState.IDLE
        self.start = -1
        self.end = -1


class BaseSegmenter(ABC):
    """子分词器基类：每次调用只处理缓冲区当前指针处的一个字符"""

    segmenter_id: Optional[SegmenterId] = None

    @abstractmethod
    def analyze(self, context: "AnalyzeContext"):
        """分析当前字符，必要时输出词元并锁定/释放缓冲区"""
        pass

    @abstractmethod
    def reset(self):
        """清空跨字符保留的状态"""
        pass

    def _scan_hits(self, context: "AnalyzeContext", hits: List[Hit],
                   single_hit: Hit, lexeme_type: LexemeType) -> List[Hit]:
        """
        最长匹配的一步：先用当前字符续接所有未完成的 hit，再并入当前字符的单字匹配

        完全匹配的 hit 输出词元；仍是前缀的 hit 保留到下一个字符
        """
        remaining = []
        cursor = context.cursor
        for hit in hits:
            hit = context.dictionary.match_with_hit(context.buffer, cursor, hit)
            if hit.is_match:
                context.add_lexeme(context.new_lexeme(
                    hit.begin, cursor - hit.begin + 1, lexeme_type))
            if hit.is_prefix:
                remaining.append(hit)

        if single_hit.is_match:
            context.add_lexeme(context.new_lexeme(cursor, 1, lexeme_type))
        if single_hit.is_prefix:
            remaining.append(single_hit)
        return remaining

    def _update_lock(self, context: "AnalyzeContext", pending: bool):
        if pending:
            context.lock_buffer(self.segmenter_id)
        else:
            context.unlock_buffer(self.segmenter_id)
