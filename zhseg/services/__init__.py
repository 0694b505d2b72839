from .dictionary_manager import DictionaryManager, load_word_list
from .tokenizer import TokenizerService

__all__ = ["DictionaryManager", "TokenizerService", "load_word_list"]
