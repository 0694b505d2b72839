"""
分词服务
为每次请求创建独立的分词会话，会话之间只共享词典管理器提供的词典
"""
import io
from typing import Dict, List, Optional

from zhseg.core.context import BUFF_EXHAUST_CRITICAL, BUFF_SIZE
from zhseg.core.lexeme import Lexeme
from zhseg.core.pipeline import SegmentPipeline
from zhseg.log import get_logger
from .dictionary_manager import DictionaryManager

logger = get_logger(__name__)


class TokenizerService:
    """分词服务"""

    def __init__(self, dict_manager: DictionaryManager, use_smart: bool = False,
                 buffer_size: int = BUFF_SIZE,
                 refill_margin: int = BUFF_EXHAUST_CRITICAL):
        self.dict_manager = dict_manager
        self.use_smart = use_smart
        self.buffer_size = buffer_size
        self.refill_margin = refill_margin

    @classmethod
    def from_settings(cls, dict_manager: DictionaryManager, settings) -> "TokenizerService":
        return cls(
            dict_manager,
            use_smart=settings.use_smart,
            buffer_size=settings.buffer_size,
            refill_margin=settings.refill_margin,
        )

    def segment(self, text: str, use_smart: Optional[bool] = None) -> List[Lexeme]:
        """对一段文本分词，use_smart 为空时使用默认模式"""
        if use_smart is None:
            use_smart = self.use_smart
        pipeline = SegmentPipeline(
            io.StringIO(text),
            self.dict_manager.get_dictionary(),
            use_smart=use_smart,
            buffer_size=self.buffer_size,
            refill_margin=self.refill_margin,
        )
        lexemes = list(pipeline)
        logger.debug("分词完成: %d 个字符, %d 个词元, smart=%s", len(text), len(lexemes), use_smart)
        return lexemes

    def process(self, text: str, use_smart: Optional[bool] = None) -> Dict:
        """分词并整理成接口返回的结构"""
        if use_smart is None:
            use_smart = self.use_smart
        lexemes = self.segment(text, use_smart)
        return {
            "text": text,
            "use_smart": use_smart,
            "tokens": [lexeme.text for lexeme in lexemes],
            "lexemes": [
                {
                    "text": lexeme.text,
                    "start": lexeme.start,
                    "stop": lexeme.stop,
                    "type": lexeme.type_name,
                }
                for lexeme in lexemes
            ],
        }
