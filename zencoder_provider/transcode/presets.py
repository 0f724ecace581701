"""
预设转换模块

把通用预设转换为 Zencoder 输出参数。预设中的数值字段都是字符串，
统一通过 parse_int 解析，无法解析时视为 0
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from zencoder_provider.core.errors import PresetNameMissing
from zencoder_provider.core.models import Preset

# 需要输出 h264_profile / h264_level 的编码器
H264_CODECS = frozenset({"h264", "libx264", "avc", "avc1"})

# 分段输出（HLS）容器
SEGMENTED_CONTAINERS = frozenset({"m3u8", "hls"})


def parse_int(value: Optional[str]) -> int:
    """
    解析字符串数值

    Args:
        value: 十进制字符串，可为空

    Returns:
        解析结果，空字符串或非数值返回 0
    """
    if value is None:
        return 0
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def get_resolution(preset: Preset) -> Tuple[int, int]:
    """
    获取预设的宽高，未指定的维度为 0，由 provider 自行决定

    Args:
        preset: 编码预设

    Returns:
        (width, height)
    """
    width = max(parse_int(preset.video.width), 0)
    height = max(parse_int(preset.video.height), 0)
    return width, height


@dataclass
class OutputSettings:
    """
    Zencoder 输出参数

    值为 None 的字段不会出现在提交文档中
    """

    label: Optional[str] = None
    format: Optional[str] = None
    type: Optional[str] = None
    video_codec: Optional[str] = None
    h264_profile: Optional[str] = None
    h264_level: Optional[str] = None
    audio_codec: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    keyframe_interval: Optional[int] = None
    fixed_keyframe_interval: Optional[bool] = None
    constant_bitrate: Optional[bool] = None
    segment_seconds: Optional[int] = None
    deinterlace: Optional[str] = None
    base_url: Optional[str] = None
    filename: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """转换为提交文档，省略未设置的字段"""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


def to_kbps(bitrate: Optional[str]) -> int:
    """bit/s 字符串转换为 kbit/s，向零截断"""
    bps = parse_int(bitrate)
    kbps = abs(bps) // 1000
    return -kbps if bps < 0 else kbps


def _optional(value):
    # 空字符串、0、False 都视为未设置
    return value or None


def translate_preset(preset: Preset) -> OutputSettings:
    """
    把预设转换为 Zencoder 输出参数（不含 base_url / filename）

    比特率在预设中以 bit/s 表示，Zencoder 使用 kbit/s，转换时整除 1000。

    Args:
        preset: 编码预设

    Returns:
        输出参数

    Raises:
        PresetNameMissing: 预设没有名称
    """
    if not preset.name:
        raise PresetNameMissing()

    settings = OutputSettings(
        label=f"{preset.name}:{preset.description}",
        format=_optional(preset.container),
        video_codec=_optional(preset.video.codec),
        audio_codec=_optional(preset.audio.codec),
    )

    if preset.video.codec.lower() in H264_CODECS:
        settings.h264_profile = _optional(preset.video.profile)
        settings.h264_level = _optional(preset.video.profile_level)

    width, height = get_resolution(preset)
    settings.width = _optional(width)
    settings.height = _optional(height)

    settings.video_bitrate = _optional(to_kbps(preset.video.bitrate))
    settings.audio_bitrate = _optional(to_kbps(preset.audio.bitrate))

    settings.keyframe_interval = _optional(parse_int(preset.video.gop_size))
    settings.fixed_keyframe_interval = _optional(preset.video.gop_mode == "fixed")
    settings.constant_bitrate = _optional(preset.rate_control == "CBR")

    # 固定开启反交错
    settings.deinterlace = "on"

    return settings


def is_segmented(preset: Preset) -> bool:
    """预设是否为分段输出（HLS）"""
    return preset.container.lower() in SEGMENTED_CONTAINERS
