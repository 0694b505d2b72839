"""
歧义裁决器

把一轮分析得到的原始词元按交叉关系划分成若干歧义区间，
智能模式下为每个区间选出一条最优的无交叉路径。
"""
from typing import List, Optional

from zhseg.log import get_logger
from .lexeme import Lexeme
from .lexeme_path import LexemePath
from .sorted_set import Cell

logger = get_logger(__name__)


class Arbitrator:
    """分词歧义裁决器"""

    def process(self, context, use_smart: bool):
        """消费 context 中的全部原始词元，把裁决结果登记到 context 的路径表"""
        raw_lexemes = context.raw_lexemes
        cross_path = LexemePath()

        lexeme = raw_lexemes.poll_first()
        while lexeme is not None:
            if not cross_path.add_cross_lexeme(lexeme):
                # 当前词元与区间不再交叉，结算上一个区间
                context.add_lexeme_path(self._resolve(cross_path, use_smart))
                cross_path = LexemePath()
                cross_path.add_cross_lexeme(lexeme)
            lexeme = raw_lexemes.poll_first()

        if len(cross_path) > 0:
            context.add_lexeme_path(self._resolve(cross_path, use_smart))

    def _resolve(self, cross_path: LexemePath, use_smart: bool) -> LexemePath:
        if len(cross_path) == 1 or not use_smart:
            return cross_path
        return self.judge(cross_path.head)

    def judge(self, cell: Optional[Cell[Lexeme]]) -> LexemePath:
        """
        歧义识别

        先从区间头部贪心地接受不交叉的词元，冲突词元入栈；
        再按后进先出依次回滚路径直到能接受冲突词元，从冲突处重新前向扫描，
        每次得到的路径都作为候选，最后按 LexemePath.rank 选出最优
        """
        options: List[LexemePath] = []
        option = LexemePath()
        conflict_stack = self._forward_path(cell, option)
        options.append(option.copy())

        while conflict_stack:
            conflict = conflict_stack.pop()
            self._back_path(conflict.value, option)
            self._forward_path(conflict, option)
            options.append(option.copy())

        best = min(options)
        logger.debug("歧义区间 [%d, %d) 共 %d 个候选, 选中 %r",
                     best.begin, best.end, len(options), best)
        return best

    @staticmethod
    def _forward_path(cell: Optional[Cell[Lexeme]], path: LexemePath) -> List[Cell[Lexeme]]:
        """前向遍历：不交叉的词元加入路径，交叉的词元节点入栈"""
        conflict_stack = []
        cur = cell
        while cur is not None:
            if not path.add_not_cross_lexeme(cur.value):
                conflict_stack.append(cur)
            cur = cur.next
        return conflict_stack

    @staticmethod
    def _back_path(lexeme: Lexeme, path: LexemePath):
        """回滚路径，直到路径能接受指定词元"""
        while path.check_cross(lexeme):
            path.remove_tail()
