"""
词典管理 API 路由
"""
from fastapi import APIRouter, HTTPException
from typing import Dict

from zhseg.api.models import (
    DictionaryWordsRequest,
    DictionarySearchResponse,
    DictionaryUpdateResponse
)
from zhseg.services.dictionary_manager import DictionaryManager

router = APIRouter(prefix="/api/v1/dictionary", tags=["dictionary"])

# 全局词典管理器实例
dict_manager: DictionaryManager = None


def set_dict_manager(dm: DictionaryManager):
    """设置词典管理器实例"""
    global dict_manager
    dict_manager = dm


def _require_manager() -> DictionaryManager:
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")
    return dict_manager


@router.get("/stats")
async def get_dictionary_stats() -> Dict[str, int]:
    """获取词典统计信息"""
    return _require_manager().get_stats()


@router.get("/search", response_model=DictionarySearchResponse)
async def search_dictionary(word: str) -> DictionarySearchResponse:
    """查询主词典中是否存在某个词"""
    manager = _require_manager()
    return DictionarySearchResponse(word=word, found=manager.contains(word))


@router.post("/add", response_model=DictionaryUpdateResponse)
async def add_dictionary_words(request: DictionaryWordsRequest) -> DictionaryUpdateResponse:
    """向主词典添加词条（运行时生效，重新加载后丢失）"""
    manager = _require_manager()

    words = manager.add_words(request.words)
    if not words:
        raise HTTPException(status_code=400, detail="No valid words given")
    return DictionaryUpdateResponse(
        status="success",
        message=f"Added {len(words)} words to main dictionary",
        words=words
    )


@router.delete("/remove", response_model=DictionaryUpdateResponse)
async def remove_dictionary_word(word: str) -> DictionaryUpdateResponse:
    """从主词典屏蔽词条"""
    manager = _require_manager()

    words = manager.remove_words([word])
    if not words:
        raise HTTPException(status_code=400, detail="No valid words given")
    return DictionaryUpdateResponse(
        status="success",
        message=f"Removed '{words[0]}' from main dictionary",
        words=words
    )


@router.post("/reload", response_model=DictionaryUpdateResponse)
async def reload_dictionaries() -> DictionaryUpdateResponse:
    """重新加载所有词典"""
    manager = _require_manager()

    try:
        manager.reload_all()
    except OSError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return DictionaryUpdateResponse(status="success", message="All dictionaries reloaded")
