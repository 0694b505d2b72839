"""
词元对象
"""
from enum import IntEnum
from typing import Optional


class InvalidLexemeError(ValueError):
    """构造了非法词元（长度为负），属于分词器自身的缺陷"""


class LexemeType(IntEnum):
    """词元类型"""
    UNKNOWN = 0
    ENGLISH = 1       # 英文
    ARABIC = 2        # 阿拉伯数字
    LETTER = 3        # 英文数字混合
    CNWORD = 4        # 中文词
    OTHER_CJK = 8     # 其他 CJK 字符
    CNUM = 16         # 中文数词
    COUNT = 32        # 中文量词
    CQUAN = 48        # 中文数量词
    CNCHAR = 64       # 中文单字


class Lexeme:
    """
    分词结果中的一个词元

    begin 是相对缓冲区起点的位置，offset 是缓冲区起点在整个输入流中的位置。
    排序规则：begin 越小越靠前，begin 相同时长度越长越靠前
    """

    __slots__ = ("offset", "begin", "_length", "lexeme_type", "text")

    def __init__(self, offset: int, begin: int, length: int,
                 lexeme_type: LexemeType, text: str = ""):
        self.offset = offset
        self.begin = begin
        self.length = length
        self.lexeme_type = lexeme_type
        self.text = text

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int):
        if value < 0:
            raise InvalidLexemeError(f"lexeme length can not be negative: {value}")
        self._length = value

    @property
    def start(self) -> int:
        """绝对起始位置（含）"""
        return self.offset + self.begin

    @property
    def stop(self) -> int:
        """绝对结束位置（不含）"""
        return self.offset + self.begin + self._length

    @property
    def end(self) -> int:
        """相对缓冲区的结束位置（不含）"""
        return self.begin + self._length

    @property
    def type_name(self) -> str:
        return self.lexeme_type.name

    def sort_key(self):
        return (self.begin, -self._length)

    def expand(self, other: Optional["Lexeme"], lexeme_type: LexemeType) -> bool:
        """将紧邻的词元并入当前词元，合并后类型变为 lexeme_type"""
        if other is not None and self.stop == other.start:
            self.length = self._length + other.length
            self.lexeme_type = lexeme_type
            return True
        return False

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Lexeme):
            return NotImplemented
        return (self.offset == other.offset and self.begin == other.begin
                and self._length == other._length)

    def __hash__(self) -> int:
        return hash((self.start, self.stop))

    def __lt__(self, other: "Lexeme") -> bool:
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"Lexeme({self.start}-{self.stop}, {self.text!r}, {self.type_name})"

    def __str__(self) -> str:
        return f"{self.start}-{self.stop} : {self.text} : \t{self.type_name}"
