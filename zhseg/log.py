"""
日志工具

- 包级 logger 默认挂 NullHandler，作为库被引用时不输出任何内容
- configure_logging() 供服务/脚本启动时挂载 StreamHandler
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "zhseg"
# 标记 configure_logging 自己挂载的 handler
_OWNED_ATTR = "_zhseg_owned"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取 logger，name 为空时返回包级 logger"""
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream=None,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    给包级 logger 挂载 StreamHandler

    重复调用时只调整级别，不会重复挂载；其他代码挂载的 handler 不受影响
    """
    logger = get_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, _OWNED_ATTR, False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    setattr(handler, _OWNED_ATTR, True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s"
    ))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
