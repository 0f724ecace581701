"""核心模块 - 数据模型、错误定义、provider 和注册表"""

from zencoder_provider.core.provider import ZencoderProvider, zencoder_factory
from zencoder_provider.core.registry import ProviderRegistry, default_registry

__all__ = ["ZencoderProvider", "zencoder_factory", "ProviderRegistry", "default_registry"]
