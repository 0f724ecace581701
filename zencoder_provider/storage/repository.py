"""
本地预设仓库

仓库只负责按名称存取 LocalPreset，get 在预设不存在时抛出 KeyError
"""

import json
import os
import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from zencoder_provider.core.models import LocalPreset
from zencoder_provider.utils.logger import get_logger

logger = get_logger(__name__)


class PresetRepository(ABC):
    """预设仓库接口"""

    @abstractmethod
    def put(self, name: str, preset: LocalPreset) -> None:
        pass

    @abstractmethod
    def get(self, name: str) -> LocalPreset:
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        pass

    @abstractmethod
    def list(self) -> List[str]:
        pass


class MemoryPresetRepository(PresetRepository):
    """内存仓库"""

    def __init__(self):
        self._presets: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def put(self, name: str, preset: LocalPreset) -> None:
        # 保存副本，调用方后续修改不影响已存储的预设
        with self._lock:
            self._presets[name] = preset.to_dict()

    def get(self, name: str) -> LocalPreset:
        with self._lock:
            data = self._presets[name]
        return LocalPreset.from_dict(data)

    def delete(self, name: str) -> None:
        with self._lock:
            self._presets.pop(name, None)

    def list(self) -> List[str]:
        with self._lock:
            return sorted(self._presets)


class JsonFilePresetRepository(PresetRepository):
    """
    JSON 文件仓库

    整个文件是 {name: LocalPreset} 的映射，每次写入都会整体重写
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, dict]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, data: Dict[str, dict]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def put(self, name: str, preset: LocalPreset) -> None:
        with self._lock:
            data = self._load()
            data[name] = preset.to_dict()
            self._save(data)

    def get(self, name: str) -> LocalPreset:
        with self._lock:
            data = self._load()
        return LocalPreset.from_dict(data[name])

    def delete(self, name: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(name, None) is not None:
                self._save(data)

    def list(self) -> List[str]:
        with self._lock:
            return sorted(self._load())


def create_repository(path: str = "") -> PresetRepository:
    """
    根据配置创建仓库

    Args:
        path: JSON 文件路径，为空时使用内存仓库
    """
    if path:
        logger.debug(f"使用 JSON 文件预设仓库: {path}")
        return JsonFilePresetRepository(path)
    return MemoryPresetRepository()
