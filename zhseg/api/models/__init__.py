from .request import TokenizeRequest, BatchTokenizeRequest, DictionaryWordsRequest
from .response import (
    TokenizeResponse,
    BatchTokenizeResponse,
    TokenInfo,
    DictionarySearchResponse,
    DictionaryUpdateResponse,
    HealthResponse
)

__all__ = [
    "TokenizeRequest",
    "BatchTokenizeRequest",
    "DictionaryWordsRequest",
    "TokenizeResponse",
    "BatchTokenizeResponse",
    "TokenInfo",
    "DictionarySearchResponse",
    "DictionaryUpdateResponse",
    "HealthResponse"
]
