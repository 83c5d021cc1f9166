"""
公共模块：日志与配置。
"""

from .logger import configure_logging, get_logger
from .config import (
    LuisClientConfig,
    get_config,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "LuisClientConfig",
    "get_config",
    "load_config",
    "load_config_from_dict",
    "load_config_from_env",
]
