"""
数据模型模块

与具体 provider 无关的预设、任务和状态模型
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


@dataclass
class VideoPreset:
    """视频参数，数值字段均为字符串"""

    profile: str = ""
    profile_level: str = ""
    bitrate: str = ""
    codec: str = ""
    gop_mode: str = ""
    gop_size: str = ""
    width: str = ""
    height: str = ""


@dataclass
class AudioPreset:
    """音频参数"""

    bitrate: str = ""
    codec: str = ""


@dataclass
class Preset:
    """编码预设"""

    name: str = ""
    description: str = ""
    container: str = ""
    rate_control: str = ""
    video: VideoPreset = field(default_factory=VideoPreset)
    audio: AudioPreset = field(default_factory=AudioPreset)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preset":
        data = dict(data)
        video = VideoPreset(**data.pop("video", None) or {})
        audio = AudioPreset(**data.pop("audio", None) or {})
        return cls(video=video, audio=audio, **data)


@dataclass
class LocalPreset:
    """本地存储的预设"""

    name: str
    preset: Preset

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "preset": self.preset.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocalPreset":
        return cls(name=data["name"], preset=Preset.from_dict(data["preset"]))


@dataclass
class OutputOptions:
    extension: str = ""


@dataclass
class PresetMap:
    """预设名称到各 provider 预设标识的映射"""

    name: str
    provider_mapping: Dict[str, str] = field(default_factory=dict)
    output_opts: OutputOptions = field(default_factory=OutputOptions)


@dataclass
class TranscodeOutput:
    file_name: str
    preset: PresetMap


@dataclass
class StreamingParams:
    """分段输出参数（HLS）"""

    segment_duration: int = 0


@dataclass
class TranscodeProfile:
    """一次提交的转码配置，可包含多个输出"""

    source_media: str
    outputs: List[TranscodeOutput] = field(default_factory=list)
    streaming_params: StreamingParams = field(default_factory=StreamingParams)


@dataclass
class Job:
    """转码任务，provider_job_id 在提交后由 provider 填写"""

    id: str = ""
    provider_job_id: str = ""


class Status(str, Enum):
    """对外暴露的任务状态"""

    QUEUED = "queued"
    STARTED = "started"
    FINISHED = "finished"
    CANCELED = "canceled"
    FAILED = "failed"


@dataclass
class SourceInfo:
    """源文件信息，duration 单位为秒"""

    duration: float = 0.0
    width: int = 0
    height: int = 0
    video_codec: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "duration": self.duration,
            "width": self.width,
            "height": self.height,
            "videoCodec": self.video_codec,
        }


@dataclass
class OutputFile:
    path: str = ""
    container: str = ""
    video_codec: str = ""
    width: int = 0
    height: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "container": self.container,
            "videoCodec": self.video_codec,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class JobOutput:
    destination: str = ""
    files: List[OutputFile] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "destination": self.destination,
            "files": [f.to_dict() for f in self.files],
        }


@dataclass
class JobStatus:
    """任务状态，每次查询重新构建"""

    provider_name: str
    provider_job_id: str
    status: Status
    progress: float = 0.0
    source_info: SourceInfo = field(default_factory=SourceInfo)
    provider_status: Dict[str, Any] = field(default_factory=dict)
    output: JobOutput = field(default_factory=JobOutput)

    def to_dict(self) -> Dict[str, Any]:
        """转换为 JSON 友好的字典（camelCase 键名）"""
        return {
            "providerName": self.provider_name,
            "providerJobId": self.provider_job_id,
            "status": self.status.value,
            "progress": self.progress,
            "sourceInfo": self.source_info.to_dict(),
            "providerStatus": self.provider_status,
            "output": self.output.to_dict(),
        }


@dataclass(frozen=True)
class Capabilities:
    input_formats: Tuple[str, ...]
    output_formats: Tuple[str, ...]
    destinations: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_formats": list(self.input_formats),
            "output_formats": list(self.output_formats),
            "destinations": list(self.destinations),
        }


__all__ = [
    "AudioPreset",
    "Capabilities",
    "Job",
    "JobOutput",
    "JobStatus",
    "LocalPreset",
    "OutputFile",
    "OutputOptions",
    "Preset",
    "PresetMap",
    "SourceInfo",
    "Status",
    "StreamingParams",
    "TranscodeOutput",
    "TranscodeProfile",
    "VideoPreset",
]
