"""
Zencoder Provider - 视频转码编排服务的 Zencoder 适配器

把通用的转码预设和任务转换为 Zencoder 任务，并把 Zencoder 的任务状态转换回通用模型。
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("zencoder-provider")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from zencoder_provider.core.provider import ZencoderProvider, zencoder_factory
from zencoder_provider.core.registry import ProviderRegistry, default_registry

__all__ = [
    "ZencoderProvider",
    "ProviderRegistry",
    "default_registry",
    "zencoder_factory",
    "__version__",
]
