"""
配置管理模块

提供两层配置：
- YAML 配置文件（支持 ${VAR:default} 形式的环境变量占位符）
- LuisClientConfig 数据类（可由环境变量或字典构建）
"""
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_REGION = "westus"


def _get_config_path() -> Path:
    """获取配置文件路径"""
    config_path = Path(os.environ.get("LUIS_CONFIG_PATH", "config/config.yml"))
    return config_path


def _resolve_env_vars(value: str) -> str:
    """解析环境变量 ${VAR:default} 或 ${VAR:-default}"""
    if not isinstance(value, str):
        return value

    pattern = re.compile(r'\${([^}:]+)(?::(-?)([^}]*?))?}')

    def replace_var(match):
        var_name, dash, default = match.groups()
        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        return default if default is not None else ""

    return pattern.sub(replace_var, value)


def _resolve_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """递归解析字典中的环境变量并转换数据类型"""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = _resolve_dict(value)
        elif isinstance(value, str):
            resolved_value = _resolve_env_vars(value)
            if resolved_value.isdigit():
                result[key] = int(resolved_value)
            elif resolved_value.lower() in ('true', 'false'):
                result[key] = resolved_value.lower() == 'true'
            else:
                result[key] = resolved_value
        else:
            result[key] = value
    return result


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    加载 YAML 配置文件

    Args:
        path: 配置文件路径，默认取 LUIS_CONFIG_PATH 或 config/config.yml

    Returns:
        解析后的配置字典；文件不存在时返回空字典
    """
    config_file = Path(path) if path else _get_config_path()
    if not config_file.exists():
        logger.debug(f"配置文件不存在: {config_file}")
        return {}

    with open(config_file, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}
    config = _resolve_dict(config)
    logger.debug(f"成功加载配置: {config_file}")
    return config


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass
class LuisClientConfig:
    """LUIS 客户端配置"""
    subscription_key: str = ""
    region: str = DEFAULT_REGION
    timeout: Optional[float] = None
    log_level: str = "INFO"
    log_json: bool = False


def load_config_from_env() -> LuisClientConfig:
    """
    从环境变量加载配置

    Returns:
        LuisClientConfig 实例
    """
    return LuisClientConfig(
        subscription_key=os.getenv("LUIS_SUBSCRIPTION_KEY", ""),
        region=os.getenv("LUIS_REGION", DEFAULT_REGION),
        timeout=_parse_timeout(os.getenv("LUIS_TIMEOUT")),
        log_level=os.getenv("LUIS_LOG_LEVEL", "INFO"),
        log_json=_parse_bool(os.getenv("LUIS_LOG_JSON", "false")),
    )


def load_config_from_dict(config_dict: Dict[str, Any]) -> LuisClientConfig:
    """
    从字典加载配置

    Args:
        config_dict: 配置字典（通常为 YAML 中的 luis 段）

    Returns:
        LuisClientConfig 实例
    """
    return LuisClientConfig(
        subscription_key=str(config_dict.get("subscription_key", "") or ""),
        region=str(config_dict.get("region", DEFAULT_REGION) or DEFAULT_REGION),
        timeout=_parse_timeout(config_dict.get("timeout")),
        log_level=str(config_dict.get("log_level", "INFO")),
        log_json=_parse_bool(config_dict.get("log_json", False)),
    )


def get_config(path: Optional[str] = None) -> LuisClientConfig:
    """
    获取当前配置：YAML 文件中的 luis 段为基础，已设置的环境变量优先

    Args:
        path: 可选的 YAML 配置文件路径

    Returns:
        LuisClientConfig 实例
    """
    file_section = load_config(path).get("luis", {})
    config = load_config_from_dict(file_section)

    if os.getenv("LUIS_SUBSCRIPTION_KEY"):
        config.subscription_key = os.environ["LUIS_SUBSCRIPTION_KEY"]
    if os.getenv("LUIS_REGION"):
        config.region = os.environ["LUIS_REGION"]
    if os.getenv("LUIS_TIMEOUT"):
        config.timeout = _parse_timeout(os.environ["LUIS_TIMEOUT"])
    if os.getenv("LUIS_LOG_LEVEL"):
        config.log_level = os.environ["LUIS_LOG_LEVEL"]
    if os.getenv("LUIS_LOG_JSON"):
        config.log_json = _parse_bool(os.environ["LUIS_LOG_JSON"])

    return config
