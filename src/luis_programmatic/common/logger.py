"""
日志系统模块

提供SDK统一的日志记录功能，支持控制台和文件输出，
并可通过JSON格式记录结构化信息。

SDK本身在导入时不会修改根日志记录器，需由调用方（或命令行工具）
显式调用 configure_logging。
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

from pythonjsonlogger.json import JsonFormatter

# 默认日志格式
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# 默认日志级别
DEFAULT_LOG_LEVEL = logging.INFO

# 默认日志目录
DEFAULT_LOG_DIR = "logs"

# 全局标记，确保只初始化一次
_logging_configured = False


def configure_logging(
    log_level=DEFAULT_LOG_LEVEL,
    log_format=DEFAULT_LOG_FORMAT,
    json_format=DEFAULT_JSON_FORMAT,
    log_to_console=True,
    log_to_file=False,
    log_dir=DEFAULT_LOG_DIR,
    log_file_name="luis.log",
    log_file_max_size=10 * 1024 * 1024,  # 10MB
    log_file_backup_count=5,
    use_rotating_file=True,
    use_json_formatter=False,
):
    """
    配置日志系统

    Args:
        log_level: 日志级别（int 或 "DEBUG"/"INFO" 等字符串）
        log_format: 日志格式字符串
        json_format: JSON日志格式字符串
        log_to_console: 是否输出到控制台
        log_to_file: 是否输出到文件
        log_dir: 日志文件目录
        log_file_name: 日志文件名
        log_file_max_size: 日志文件最大大小（字节）
        log_file_backup_count: 日志文件备份数量
        use_rotating_file: 是否使用滚动文件
        use_json_formatter: 是否使用JSON格式
    """
    global _logging_configured

    # 如果已经配置过，不重复配置
    if _logging_configured:
        return

    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), DEFAULT_LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 清除已有处理器
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if use_json_formatter:
        formatter = JsonFormatter(json_format)
    else:
        formatter = logging.Formatter(log_format)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, log_file_name)

        if use_rotating_file:
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=log_file_max_size,
                backupCount=log_file_backup_count,
                encoding="utf-8"
            )
        else:
            file_handler = TimedRotatingFileHandler(
                log_file_path,
                when="midnight",
                backupCount=log_file_backup_count,
                encoding="utf-8"
            )

        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name):
    """
    获取指定名称的日志记录器

    Args:
        name: 日志记录器名称

    Returns:
        日志记录器
    """
    return logging.getLogger(name)
