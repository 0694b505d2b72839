from .tokenize import router as tokenize_router, set_tokenizer
from .dictionary import router as dictionary_router, set_dict_manager

__all__ = [
    "tokenize_router",
    "dictionary_router",
    "set_tokenizer",
    "set_dict_manager"
]
