"""
中文分词服务 - API 入口
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zhseg import __version__
from zhseg.config import settings
from zhseg.api.routes import tokenize_router, dictionary_router, set_tokenizer, set_dict_manager
from zhseg.api.models import HealthResponse
from zhseg.log import configure_logging, get_logger
from zhseg.services.dictionary_manager import DictionaryManager
from zhseg.services.tokenizer import TokenizerService

logger = get_logger(__name__)

# 全局实例
tokenizer: TokenizerService = None
dict_manager: DictionaryManager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global tokenizer, dict_manager

    configure_logging(settings.log_level)
    logger.info("正在初始化服务...")

    # 初始化词典管理器
    dict_manager = DictionaryManager.from_settings(settings)
    dict_manager.load_all()
    logger.info("词典加载完成: %s", dict_manager.get_stats())

    # 初始化分词服务
    tokenizer = TokenizerService.from_settings(dict_manager, settings)

    # 设置路由依赖
    set_tokenizer(tokenizer)
    set_dict_manager(dict_manager)

    logger.info("服务启动完成 (smart=%s)", settings.use_smart)

    yield

    logger.info("服务关闭中...")


# 创建 FastAPI 应用
app = FastAPI(
    title="中文分词服务",
    description="""
    ## 功能
    - 细粒度分词：输出文本中所有词典匹配的词
    - 智能分词：歧义裁决，合并数量词，过滤停用词
    - 词典管理：运行时增删主词典词条、重新加载词典

    ## 词元类型
    ENGLISH、ARABIC、LETTER、CNWORD、CNCHAR、OTHER_CJK、CNUM、COUNT、CQUAN
    """,
    version=__version__,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(tokenize_router)
app.include_router(dictionary_router)


@app.get("/", tags=["health"])
async def root():
    """根路径"""
    return {"message": "中文分词服务", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """健康检查"""
    loaded = dict_manager is not None and dict_manager.is_loaded()
    return HealthResponse(
        status="healthy",
        version=__version__,
        dictionaries_loaded=loaded,
        dictionary_stats=dict_manager.get_stats() if loaded else {}
    )
