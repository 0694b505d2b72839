"""
分词相关 API 路由
"""
from fastapi import APIRouter, HTTPException

from zhseg.api.models import (
    TokenizeRequest,
    BatchTokenizeRequest,
    TokenizeResponse,
    BatchTokenizeResponse
)
from zhseg.config import settings
from zhseg.log import get_logger
from zhseg.services.tokenizer import TokenizerService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["tokenize"])

# 全局分词服务实例（在 main.py 中初始化）
tokenizer: TokenizerService = None


def set_tokenizer(t: TokenizerService):
    """设置分词服务实例"""
    global tokenizer
    tokenizer = t


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_single(request: TokenizeRequest) -> TokenizeResponse:
    """
    对单段文本分词

    - use_smart=false：细粒度切分，输出所有词典匹配
    - use_smart=true：歧义裁决 + 数量词合并
    """
    if tokenizer is None:
        raise HTTPException(status_code=500, detail="Tokenizer not initialized")

    try:
        result = tokenizer.process(request.text, use_smart=request.use_smart)
        return TokenizeResponse(**result)
    except Exception as e:
        logger.exception("分词失败")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/tokenize/batch", response_model=BatchTokenizeResponse)
async def tokenize_batch(request: BatchTokenizeRequest) -> BatchTokenizeResponse:
    """批量分词，单条失败不影响其余文本"""
    if tokenizer is None:
        raise HTTPException(status_code=500, detail="Tokenizer not initialized")
    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many texts: {len(request.texts)} > {settings.max_batch_size}"
        )

    results = []
    success_count = 0
    use_smart = request.use_smart if request.use_smart is not None else tokenizer.use_smart

    for text in request.texts:
        try:
            result = tokenizer.process(text, use_smart=use_smart)
            results.append(TokenizeResponse(**result))
            success_count += 1
        except Exception:
            logger.exception("批量分词中单条失败: %r", text[:50])
            results.append(TokenizeResponse(
                text=text,
                use_smart=use_smart,
                tokens=[],
                lexemes=[]
            ))

    return BatchTokenizeResponse(
        results=results,
        total=len(request.texts),
        success_count=success_count
    )
