"""
配置管理模块

支持从环境变量、配置文件加载配置
"""

import json
import os
from dataclasses import dataclass
from typing import Optional


def _read_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class Config:
    """应用配置"""

    # Zencoder 账户
    api_key: str = ""
    api_url: str = "https://app.zencoder.com/api/v2"
    request_timeout: float = 30

    # 输出目标模板，可内嵌 user:password
    destination: str = ""

    # 本地预设存储，为空时使用内存存储
    preset_store: str = ""

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """从环境变量加载配置"""
        return cls(
            api_key=os.getenv("ZENCODER_API_KEY", ""),
            api_url=os.getenv("ZENCODER_API_URL", "https://app.zencoder.com/api/v2"),
            request_timeout=float(os.getenv("ZENCODER_TIMEOUT", 30)),
            destination=os.getenv("ZENCODER_DESTINATION", ""),
            preset_store=os.getenv("ZENCODER_PRESET_STORE", ""),
            log_level=os.getenv("ZENCODER_LOG_LEVEL", "INFO"),
            log_file=os.getenv("ZENCODER_LOG_FILE"),
        )

    @classmethod
    def from_file(cls, path: str) -> "Config":
        """从 JSON 文件加载配置"""
        return cls(**_read_json(path))

    def to_file(self, path: str) -> None:
        """保存配置到 JSON 文件"""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.__dict__, f, indent=2)


# 全局配置实例
config = Config.from_env()


def load_config(config_path: Optional[str] = None) -> Config:
    """
    加载配置

    优先级：配置文件 > 环境变量 > 默认值

    Args:
        config_path: 配置文件路径

    Returns:
        配置实例
    """
    global config

    # 先从环境变量加载
    config = Config.from_env()

    # 如果有配置文件，覆盖配置
    if config_path and os.path.exists(config_path):
        data = _read_json(config_path)
        # 未知字段会抛出 TypeError
        Config(**data)
        # 只覆盖文件中显式给出的字段
        for key, value in data.items():
            setattr(config, key, value)

    return config
