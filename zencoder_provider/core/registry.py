"""
provider 注册表

在进程启动时显式创建，按名称查找 provider 工厂函数
"""

from typing import Callable, Dict, List

from zencoder_provider.core.errors import ProviderNotFound
from zencoder_provider.core.provider import NAME, zencoder_factory
from zencoder_provider.utils.config import Config

Factory = Callable[[Config], object]


class ProviderRegistry:
    """provider 名称到工厂函数的映射"""

    def __init__(self):
        self._factories: Dict[str, Factory] = {}

    def register(self, name: str, factory: Factory) -> None:
        if name in self._factories:
            raise ValueError(f"provider 已注册: {name}")
        self._factories[name] = factory

    def get_factory(self, name: str) -> Factory:
        """
        获取工厂函数

        Raises:
            ProviderNotFound: 未注册
        """
        try:
            return self._factories[name]
        except KeyError:
            raise ProviderNotFound(name) from None

    def create(self, name: str, config: Config):
        """使用注册的工厂函数创建 provider"""
        return self.get_factory(name)(config)

    def names(self) -> List[str]:
        return sorted(self._factories)


def default_registry() -> ProviderRegistry:
    """创建已注册 Zencoder 的注册表"""
    registry = ProviderRegistry()
    registry.register(NAME, zencoder_factory)
    return registry
