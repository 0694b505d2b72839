"""
分词处理流水线

从字符流中拉取内容，按缓冲区一轮一轮地驱动各子分词器和歧义裁决器，
再把结果逐个交给调用方：

    填充缓冲区 → 逐字符交给子分词器 → 歧义裁决 → 输出结果 → 数量词合并 / 停用词过滤
"""
import io
from typing import Iterator, List, Optional

from zhseg.log import get_logger
from .arbitrator import Arbitrator
from .context import BUFF_EXHAUST_CRITICAL, BUFF_SIZE, AnalyzeContext
from .dict_trie import Dictionary
from .lexeme import Lexeme
from .segmenters import create_segmenters

logger = get_logger(__name__)


class SegmentPipeline:
    """
    分词会话

    每个会话独占自己的上下文和子分词器，只与其他会话共享只读的 Dictionary，
    因此不同线程可以各自持有一个会话并发分词
    """

    def __init__(self, reader, dictionary: Dictionary, use_smart: bool = False,
                 buffer_size: int = BUFF_SIZE,
                 refill_margin: int = BUFF_EXHAUST_CRITICAL):
        """
        Args:
            reader: 提供 read(n) 的文本流
            dictionary: 共享词典
            use_smart: 是否启用智能分词（歧义裁决、数量词合并）
            buffer_size: 缓冲区大小
            refill_margin: 缓冲区尾部临界区大小
        """
        self._reader = reader
        self.use_smart = use_smart
        self._context = AnalyzeContext(dictionary, use_smart, buffer_size, refill_margin)
        self._arbitrator = Arbitrator()
        self._segmenters = create_segmenters()

    def next(self) -> Optional[Lexeme]:
        """
        获取下一个词元

        结果队列为空时读取新内容并分析一轮；输入读完时返回 None，并重置内部状态
        """
        context = self._context
        lexeme = context.get_next_lexeme()
        while lexeme is None:
            available = context.fill_buffer(self._reader)
            if available <= 0:
                context.reset()
                return None

            self._analyze(context)
            self._arbitrator.process(context, self.use_smart)
            context.output_to_result()
            context.update_offset()

            lexeme = context.get_next_lexeme()
        return lexeme

    def _analyze(self, context: AnalyzeContext):
        """对缓冲区中的内容分析一轮"""
        context.init_cursor()
        while True:
            if context.is_at_buffer_edge():
                # 指针到达缓冲区末尾而输入可能未读完：追加内容，避免截断正在匹配的词
                context.extend_buffer(self._reader)

            for segmenter in self._segmenters:
                segmenter.analyze(context)

            # 缓冲区快用完且没有被占用时结束本轮，剩余字符留给下一轮
            if context.need_refill_buffer():
                break
            if not context.move_cursor():
                break

        for segmenter in self._segmenters:
            segmenter.reset()
        context.release_buffer()
        logger.debug("完成一轮分析: offset=%d, cursor=%d", context.buff_offset, context.cursor)

    def reset(self, reader):
        """使用新的输入流重置分词器"""
        self._reader = reader
        self._context.reset()
        for segmenter in self._segmenters:
            segmenter.reset()

    def __iter__(self) -> Iterator[Lexeme]:
        lexeme = self.next()
        while lexeme is not None:
            yield lexeme
            lexeme = self.next()


def segment(text: str, dictionary: Dictionary, use_smart: bool = False,
            **kwargs) -> List[Lexeme]:
    """便捷函数：对一段文本分词"""
    pipeline = SegmentPipeline(io.StringIO(text), dictionary, use_smart, **kwargs)
    return list(pipeline)
