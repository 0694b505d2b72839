#!/usr/bin/env python3

"""
启动服务
"""
import uvicorn
from zhseg.config import settings
from zhseg.log import configure_logging, get_logger

if __name__ == "__main__":
    configure_logging(settings.log_level)
    logger = get_logger("zhseg.run")
    logger.info("启动中文分词服务...")
    logger.info("API文档: http://localhost:%d/docs", settings.api_port)

    uvicorn.run(
        "zhseg.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
