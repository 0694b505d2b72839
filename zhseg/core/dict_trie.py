"""
词典 Trie 树

- DictNode：子节点不超过 3 个时用有序数组 + 二分查找，超过后整体迁移到 dict
- Hit：一次（可续接的）匹配结果，同时记录"完全匹配"和"前缀匹配"两种状态
- Dictionary：主词典、量词词典、停用词词典三棵树的集合，构建后在多个会话间只读共享

删除词条只是把词尾节点置为不可用，节点本身保留，
因此经过该节点的更长词条仍然可以正常匹配。
"""
from bisect import bisect_left
from enum import IntFlag
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .char_util import normalize_text

# 子节点数组容量上限
ARRAY_LENGTH_LIMIT = 3


class HitState(IntFlag):
    UNMATCH = 0
    MATCH = 0x01
    PREFIX = 0x10


class Hit:
    """词典匹配结果"""

    __slots__ = ("begin", "end", "matched_node", "state")

    def __init__(self, begin: int = 0):
        self.begin = begin
        self.end = begin
        self.matched_node: Optional["DictNode"] = None
        self.state = HitState.UNMATCH

    @property
    def is_match(self) -> bool:
        """完全匹配"""
        return bool(self.state & HitState.MATCH)

    @property
    def is_prefix(self) -> bool:
        """是某个更长词条的前缀，可以继续匹配"""
        return bool(self.state & HitState.PREFIX)

    @property
    def is_unmatch(self) -> bool:
        return self.state == HitState.UNMATCH

    def set_match(self):
        self.state |= HitState.MATCH

    def set_prefix(self):
        self.state |= HitState.PREFIX

    def set_unmatch(self):
        self.state = HitState.UNMATCH

    def __repr__(self) -> str:
        return f"Hit(begin={self.begin}, end={self.end}, state={self.state!r})"


class DictNode:
    """Trie 树节点"""

    __slots__ = ("char", "enabled", "_children", "_map")

    def __init__(self, char: str = ""):
        self.char = char
        self.enabled = False  # 从根到当前节点的路径是否是一个可用词条
        # (有序字符列表, 对应节点列表)，每次插入都换成新的元组，已发布的列表不再修改
        self._children: Optional[Tuple[List[str], List["DictNode"]]] = None
        self._map: Optional[Dict[str, "DictNode"]] = None

    @property
    def size(self) -> int:
        m = self._map
        if m is not None:
            return len(m)
        children = self._children
        if children is not None:
            return len(children[0])
        return 0

    @property
    def has_next(self) -> bool:
        return self.size > 0

    def _find(self, char: str) -> Optional["DictNode"]:
        # 先读 _map：迁移时 _map 先于 _children 更新
        m = self._map
        if m is not None:
            return m.get(char)
        children = self._children
        if children is not None:
            keys, nodes = children
            idx = bisect_left(keys, char)
            if idx < len(keys) and keys[idx] == char:
                return nodes[idx]
        return None

    def _get_or_create(self, char: str) -> "DictNode":
        node = self._find(char)
        if node is not None:
            return node

        node = DictNode(char)
        if self._map is not None:
            self._map[char] = node
        elif self._children is None:
            self._children = ([char], [node])
        elif len(self._children[0]) < ARRAY_LENGTH_LIMIT:
            keys, nodes = self._children
            idx = bisect_left(keys, char)
            self._children = (keys[:idx] + [char] + keys[idx:],
                              nodes[:idx] + [node] + nodes[idx:])
        else:
            # 数组已满，构建完整的映射表后再整体替换
            m = dict(zip(*self._children))
            m[char] = node
            self._map = m
            self._children = None
        return node

    def fill_segment(self, word: str):
        """沿 word 的字符路径建立节点，并把词尾置为可用"""
        node = self
        for char in word:
            node = node._get_or_create(char)
        node.enabled = True

    def disable_segment(self, word: str):
        """屏蔽词条：只修改已存在的节点，不创建新节点"""
        node = self
        for char in word:
            node = node._find(char)
            if node is None:
                return
        node.enabled = False

    def match(self, chars: Sequence[str], begin: int, length: int,
              hit: Optional[Hit] = None) -> Hit:
        """
        从当前节点开始匹配 chars[begin:begin + length]

        传入 hit 时复用该对象（先清空状态），用于从上一次前缀匹配的节点续接
        """
        if hit is None:
            hit = Hit(begin)
        else:
            hit.set_unmatch()

        node = self
        for index in range(begin, begin + length):
            hit.end = index
            node = node._find(chars[index])
            if node is None:
                return hit

        if node.enabled:
            hit.set_match()
        if node.has_next:
            hit.set_prefix()
            hit.matched_node = node
        return hit

    def __repr__(self) -> str:
        return f"DictNode({self.char!r}, enabled={self.enabled}, size={self.size})"


def _clean_words(words: Iterable[str]) -> Iterable[str]:
    for word in words:
        word = normalize_text(word.strip().lower())
        if word:
            yield word


class Dictionary:
    """
    分词词典集合

    显式构造后交给各个分词会话共享；构建完成后对分词过程只读
    """

    def __init__(self,
                 main_words: Iterable[str] = (),
                 quantifier_words: Iterable[str] = (),
                 stopwords: Iterable[str] = ()):
        self.main_root = DictNode()
        self.quantifier_root = DictNode()
        self.stopword_root = DictNode()

        self.add_words(main_words)
        for word in _clean_words(quantifier_words):
            self.quantifier_root.fill_segment(word)
        for word in _clean_words(stopwords):
            self.stopword_root.fill_segment(word)

    def add_words(self, words: Iterable[str]):
        """批量加入主词典"""
        for word in _clean_words(words):
            self.main_root.fill_segment(word)

    def remove_words(self, words: Iterable[str]):
        """批量从主词典屏蔽"""
        for word in _clean_words(words):
            self.main_root.disable_segment(word)

    def match_main(self, chars: Sequence[str], begin: int = 0,
                   length: Optional[int] = None) -> Hit:
        if length is None:
            length = len(chars) - begin
        return self.main_root.match(chars, begin, length)

    def match_quantifier(self, chars: Sequence[str], begin: int = 0,
                         length: Optional[int] = None) -> Hit:
        if length is None:
            length = len(chars) - begin
        return self.quantifier_root.match(chars, begin, length)

    @staticmethod
    def match_with_hit(chars: Sequence[str], cursor: int, hit: Hit) -> Hit:
        """从 hit 已匹配到的节点出发，继续匹配 cursor 处的一个字符"""
        return hit.matched_node.match(chars, cursor, 1, hit)

    def is_stopword(self, chars: Sequence[str], begin: int, length: int) -> bool:
        return self.stopword_root.match(chars, begin, length).is_match
