"""存储模块 - 本地预设仓库"""

from zencoder_provider.storage.repository import (
    JsonFilePresetRepository,
    MemoryPresetRepository,
    PresetRepository,
    create_repository,
)
from zencoder_provider.storage.store import LocalPresetStore

__all__ = [
    "JsonFilePresetRepository",
    "LocalPresetStore",
    "MemoryPresetRepository",
    "PresetRepository",
    "create_repository",
]
