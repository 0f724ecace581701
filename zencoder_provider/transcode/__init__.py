"""转换模块 - 预设、输出文档和任务状态的转换"""

from zencoder_provider.transcode.output import build_base_url, build_output
from zencoder_provider.transcode.presets import OutputSettings, get_resolution, translate_preset
from zencoder_provider.transcode.status import assemble_job_status, map_status

__all__ = [
    "OutputSettings",
    "assemble_job_status",
    "build_base_url",
    "build_output",
    "get_resolution",
    "map_status",
    "translate_preset",
]
