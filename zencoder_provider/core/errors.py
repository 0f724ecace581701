"""
错误定义模块

所有适配器错误都继承自 ProviderError，调用方可以按类别区分处理
"""

from typing import Optional


class ProviderError(Exception):
    """适配器错误基类"""


class ValidationError(ProviderError):
    """请求参数校验失败，不会在内部重试"""


class PresetNameMissing(ValidationError):
    """预设缺少名称"""

    def __init__(self):
        super().__init__("preset name missing")


class ProviderPresetMappingMissing(ValidationError):
    """预设映射中没有当前 provider 的条目"""

    def __init__(self, preset_name: str, provider_name: str):
        self.preset_name = preset_name
        self.provider_name = provider_name
        super().__init__(f"预设 '{preset_name}' 没有 {provider_name} 映射")


class NotFoundError(ProviderError):
    """资源不存在"""


class LocalPresetNotFound(NotFoundError):
    """本地预设不存在"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"local preset not found: {name}")


class ProviderNotFound(NotFoundError):
    """注册表中没有该 provider"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"provider not found: {name}")


class InvalidDestination(ProviderError):
    """输出目标模板格式错误"""


class InvalidConfig(ProviderError):
    """provider 配置无效"""


class TransportError(ProviderError):
    """远程调用失败，原样向上抛出"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
