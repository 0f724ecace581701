"""
本地预设存储

在仓库之上校验预设名称，并把仓库的 KeyError 转换为 LocalPresetNotFound
"""

from typing import List

from zencoder_provider.core.errors import LocalPresetNotFound, PresetNameMissing
from zencoder_provider.core.models import LocalPreset, Preset
from zencoder_provider.storage.repository import PresetRepository
from zencoder_provider.utils.logger import get_logger

logger = get_logger(__name__)


class LocalPresetStore:
    """本地预设的增删查"""

    def __init__(self, repository: PresetRepository):
        self.repository = repository

    def create_preset(self, preset: Preset) -> str:
        """
        保存预设

        Args:
            preset: 编码预设

        Returns:
            预设名称

        Raises:
            PresetNameMissing: 预设没有名称
        """
        if not preset.name:
            raise PresetNameMissing()
        self.repository.put(preset.name, LocalPreset(name=preset.name, preset=preset))
        logger.info(f"保存本地预设: {preset.name}")
        return preset.name

    def get_preset(self, name: str) -> LocalPreset:
        """
        读取预设

        Raises:
            LocalPresetNotFound: 预设不存在
        """
        try:
            return self.repository.get(name)
        except KeyError:
            raise LocalPresetNotFound(name) from None

    def delete_preset(self, name: str) -> None:
        """删除预设，预设不存在时不报错"""
        self.repository.delete(name)
        logger.info(f"删除本地预设: {name}")

    def list_presets(self) -> List[str]:
        """获取所有预设名称列表"""
        return self.repository.list()
