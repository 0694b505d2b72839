"""
词典管理器
负责加载词表文件、构建共享词典，以及运行时增删主词典词条
"""
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from zhseg.core.char_util import normalize_text
from zhseg.core.dict_trie import Dictionary
from zhseg.log import get_logger

logger = get_logger(__name__)


def load_word_list(path: Path) -> List[str]:
    """
    读取按行组织的 UTF-8 词表

    文件开头的 BOM 会被去掉；每行去除首尾空白并转小写，空行忽略。
    文件不存在时直接抛出 FileNotFoundError
    """
    words = []
    with open(path, "r", encoding="utf-8-sig") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)
    return words


class DictionaryManager:
    """词典管理器"""

    def __init__(self,
                 dictionary_path: Path,
                 main_dict: str = "main.dic",
                 quantifier_dict: str = "quantifier.dic",
                 stopword_dicts: Sequence[str] = ("stopword.dic",),
                 ext_dicts: Sequence[str] = ()):
        self.dictionary_path = Path(dictionary_path)
        self.main_dict = main_dict
        self.quantifier_dict = quantifier_dict
        self.stopword_dicts = list(stopword_dicts)
        self.ext_dicts = list(ext_dicts)

        self._dictionary: Optional[Dictionary] = None
        self._main_words: set = set()
        self._stats: Dict[str, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "DictionaryManager":
        return cls(
            settings.dictionary_path,
            main_dict=settings.main_dict,
            quantifier_dict=settings.quantifier_dict,
            stopword_dicts=settings.stopword_dicts,
            ext_dicts=settings.ext_dicts,
        )

    def load_all(self) -> Dictionary:
        """加载所有词表并重新构建词典"""
        with self._lock:
            self._dictionary = self._build()
            return self._dictionary

    def reload_all(self) -> Dictionary:
        """重新加载所有词典（运行时增删的词条会丢失）"""
        logger.info("重新加载词典: %s", self.dictionary_path)
        return self.load_all()

    def get_dictionary(self) -> Dictionary:
        """获取共享词典，首次调用时加载；多个线程同时调用时只有一个线程执行加载"""
        dictionary = self._dictionary
        if dictionary is None:
            with self._lock:
                if self._dictionary is None:
                    self._dictionary = self._build()
                dictionary = self._dictionary
        return dictionary

    def _build(self) -> Dictionary:
        stats = {}

        main_words = load_word_list(self.dictionary_path / self.main_dict)
        stats[self.main_dict] = len(main_words)
        for name in self.ext_dicts:
            words = load_word_list(self.dictionary_path / name)
            stats[name] = len(words)
            main_words.extend(words)

        quantifier_words = load_word_list(self.dictionary_path / self.quantifier_dict)
        stats[self.quantifier_dict] = len(quantifier_words)

        stopwords = []
        for name in self.stopword_dicts:
            words = load_word_list(self.dictionary_path / name)
            stats[name] = len(words)
            stopwords.extend(words)

        dictionary = Dictionary(main_words, quantifier_words, stopwords)
        self._main_words = {normalize_text(w) for w in main_words}
        self._stats = stats
        for name, count in stats.items():
            logger.info("加载词典 %s: %d 条", name, count)
        return dictionary

    def is_loaded(self) -> bool:
        """检查词典是否已加载"""
        return self._dictionary is not None

    def get_stats(self) -> Dict[str, int]:
        """获取词典统计信息"""
        stats = dict(self._stats)
        stats["main_words"] = len(self._main_words)
        return stats

    def contains(self, word: str) -> bool:
        """主词典中是否包含（且未屏蔽）某个词"""
        word = normalize_text(word.strip().lower())
        if not word:
            return False
        return self.get_dictionary().match_main(word).is_match

    def add_words(self, words: Iterable[str]) -> List[str]:
        """运行时向主词典添加词条，返回实际处理的词"""
        cleaned = self._clean(words)
        dictionary = self.get_dictionary()
        with self._lock:
            dictionary.add_words(cleaned)
            self._main_words.update(cleaned)
        logger.info("主词典添加 %d 个词", len(cleaned))
        return cleaned

    def remove_words(self, words: Iterable[str]) -> List[str]:
        """运行时从主词典屏蔽词条，返回实际处理的词"""
        cleaned = self._clean(words)
        dictionary = self.get_dictionary()
        with self._lock:
            dictionary.remove_words(cleaned)
            self._main_words.difference_update(cleaned)
        logger.info("主词典屏蔽 %d 个词", len(cleaned))
        return cleaned

    @staticmethod
    def _clean(words: Iterable[str]) -> List[str]:
        result = []
        for word in words:
            word = normalize_text(word.strip().lower())
            if word:
                result.append(word)
        return result
