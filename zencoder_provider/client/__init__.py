"""客户端模块 - Zencoder API 访问"""

from zencoder_provider.client.zencoder_client import ZencoderClient

__all__ = ["ZencoderClient"]
