"""
API 响应模型定义
"""
from typing import Dict, List
from pydantic import BaseModel, Field

class TokenInfo(BaseModel):
    """分词结果中的单个词元"""
    text: str = Field(..., description="词元文本（已规范化）")
    start: int = Field(..., description="起始位置（含）")
    stop: int = Field(..., description="结束位置（不含）")
    type: str = Field(..., description="词元类型")

class TokenizeResponse(BaseModel):
    """分词响应"""
    text: str = Field(..., description="原始文本")
    use_smart: bool = Field(..., description="是否使用智能分词")
    tokens: List[str] = Field(..., description="分词结果列表")
    lexemes: List[TokenInfo] = Field(..., description="带位置和类型的分词结果")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "中华人民共和国",
                    "use_smart": True,
                    "tokens": ["中华人民共和国"],
                    "lexemes": [
                        {"text": "中华人民共和国", "start": 0, "stop": 7, "type": "CNWORD"}
                    ]
                }
            ]
        }
    }

class BatchTokenizeResponse(BaseModel):
    """批量分词响应"""
    results: List[TokenizeResponse] = Field(..., description="分词结果列表")
    total: int = Field(..., description="处理总数")
    success_count: int = Field(..., description="成功数量")

class DictionarySearchResponse(BaseModel):
    """词典查询响应"""
    word: str = Field(..., description="查询的词语")
    found: bool = Field(..., description="主词典中是否存在")

class DictionaryUpdateResponse(BaseModel):
    """词典变更响应"""
    status: str = Field(..., description="处理状态")
    message: str = Field(..., description="说明")
    words: List[str] = Field(default_factory=list, description="实际处理的词语")


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str = Field(..., description="服务状态")
    version: str = Field(..., description="版本号")
    dictionaries_loaded: bool = Field(..., description="词典是否加载")
    dictionary_stats: Dict[str, int] = Field(default_factory=dict, description="词典统计")
