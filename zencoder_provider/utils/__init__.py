"""工具模块 - 配置、日志等"""

from zencoder_provider.utils.config import config
from zencoder_provider.utils.logger import get_logger

__all__ = ["config", "get_logger"]
