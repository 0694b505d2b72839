"""
项目配置管理
"""
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""

    # API配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # 词典配置
    base_path: Path = Path(__file__).parent.parent
    dictionary_path: Path = base_path / "dictionaries"
    main_dict: str = "main.dic"
    quantifier_dict: str = "quantifier.dic"
    stopword_dicts: List[str] = ["stopword.dic"]
    ext_dicts: List[str] = []  # 扩展词典，合并进主词典

    # 分词配置
    use_smart: bool = False
    buffer_size: int = 4096
    refill_margin: int = 100  # 缓冲区耗尽临界区

    # 性能配置
    max_batch_size: int = 100

    # 日志配置
    log_level: str = "INFO"

    class Config:
        env_prefix = "ZHSEG_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# 全局配置实例
settings = Settings()
