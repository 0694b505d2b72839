"""
词元路径

一条 LexemePath 是某个歧义区间上的一种候选切分方案。
"""
from typing import Tuple

from .lexeme import Lexeme
from .sorted_set import SortedLinkedSet


class LexemePath(SortedLinkedSet[Lexeme]):
    """
    词元链

    begin / end 为路径覆盖的相对起止位置（end 不含），
    payload_length 为有效文本长度：交叉路径中等于跨度，
    无交叉路径中等于各词元长度之和（词元之间可能不连续）
    """

    def __init__(self):
        super().__init__(key=Lexeme.sort_key)
        self.begin = -1
        self.end = -1
        self.payload_length = 0

    @property
    def path_span(self) -> int:
        return self.end - self.begin

    def check_cross(self, lexeme: Lexeme) -> bool:
        """词元是否与当前路径交叉（存在歧义）"""
        return (
            self.begin <= lexeme.begin < self.end or
            lexeme.begin <= self.begin < lexeme.end
        )

    def _init_with(self, lexeme: Lexeme):
        self.insert(lexeme)
        self.begin = lexeme.begin
        self.end = lexeme.end
        self.payload_length = lexeme.length

    def add_cross_lexeme(self, lexeme: Lexeme) -> bool:
        """用与路径交叉的词元扩展路径，不交叉时返回 False"""
        if len(self) == 0:
            self._init_with(lexeme)
            return True
        if not self.check_cross(lexeme):
            return False

        self.insert(lexeme)
        if lexeme.end > self.end:
            self.end = lexeme.end
        self.payload_length = self.end - self.begin
        return True

    def add_not_cross_lexeme(self, lexeme: Lexeme) -> bool:
        """用与路径不交叉的词元扩展路径，交叉时返回 False"""
        if len(self) == 0:
            self._init_with(lexeme)
            return True
        if self.check_cross(lexeme):
            return False

        self.insert(lexeme)
        self.payload_length += lexeme.length
        self.begin = self.peek_first().begin
        self.end = self.peek_last().end
        return True

    def remove_tail(self) -> Lexeme:
        """移除并返回末尾词元"""
        tail = self.poll_last()
        if len(self) == 0:
            self.begin = -1
            self.end = -1
            self.payload_length = 0
        else:
            self.payload_length -= tail.length
            self.end = self.peek_last().end
        return tail

    def x_weight(self) -> int:
        """词元长度积，长度越平均积越大"""
        product = 1
        for lexeme in self:
            product *= lexeme.length
        return product

    def p_weight(self) -> int:
        """词元位置权重：sum(位置序号 * 长度)"""
        return sum(pos * lexeme.length for pos, lexeme in enumerate(self, start=1))

    def rank(self) -> Tuple[int, int, int, int, int, int]:
        """排序键，越大越优"""
        return (
            self.payload_length,   # 有效文本越长越好
            -len(self),            # 词元越少越好
            self.path_span,        # 跨度越大越好
            self.end,              # 逆向切分优先，位置越靠后越好
            self.x_weight(),       # 词元长度越平均越好
            self.p_weight(),       # 位置权重越大越好
        )

    def copy(self) -> "LexemePath":
        path = LexemePath()
        for lexeme in self:
            path.insert(lexeme)
        path.begin = self.begin
        path.end = self.end
        path.payload_length = self.payload_length
        return path

    def __lt__(self, other: "LexemePath") -> bool:
        # 更优的路径排在前面
        return self.rank() > other.rank()

    def __repr__(self) -> str:
        lexemes = ", ".join(repr(lex) for lex in self)
        return (f"LexemePath(begin={self.begin}, end={self.end}, "
                f"length={self.payload_length}, [{lexemes}])")
