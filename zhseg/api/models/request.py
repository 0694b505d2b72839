"""
API 请求模型定义
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    """单条分词请求"""
    text: str = Field(..., description="待分词的文本", min_length=1, max_length=100000)
    use_smart: Optional[bool] = Field(
        default=None,
        description="是否启用智能分词，不传时使用服务端默认配置"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"text": "中华人民共和国成立于1949年", "use_smart": True}
            ]
        }
    }


class BatchTokenizeRequest(BaseModel):
    """批量分词请求"""
    texts: List[str] = Field(
        ...,
        description="待分词的文本列表",
        min_length=1
    )
    use_smart: Optional[bool] = Field(
        default=None,
        description="是否启用智能分词"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "texts": ["北京大学生活", "iphone15 三个苹果"],
                    "use_smart": False
                }
            ]
        }
    }


class DictionaryWordsRequest(BaseModel):
    """添加主词典词条请求"""
    words: List[str] = Field(..., description="词语列表", min_length=1)
