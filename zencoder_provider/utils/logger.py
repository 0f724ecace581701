"""
日志模块

提供统一的日志配置
"""

import logging
import sys

from zencoder_provider.utils.config import config


def get_logger(name: str = None) -> logging.Logger:
    """
    获取日志记录器

    Args:
        name: 日志记录器名称，通常使用 __name__

    Returns:
        配置好的日志记录器
    """
    logger = logging.getLogger(name or "zencoder_provider")

    # 避免重复配置
    if logger.handlers:
        return logger

    # 设置日志级别
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # 创建格式器
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 控制台处理器，输出到 stderr，stdout 留给命令输出
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器（如果配置了日志文件）
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def set_log_level(level: str) -> None:
    """
    设置日志级别

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    value = getattr(logging, level.upper())
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("zencoder_provider") and isinstance(logger, logging.Logger):
            logger.setLevel(value)
            for handler in logger.handlers:
                handler.setLevel(value)
