"""
任务状态模块

把 Zencoder 返回的状态文档转换为通用的 JobStatus
"""

import copy
import math
from typing import Any, Dict, Optional

from zencoder_provider.core.models import JobOutput, JobStatus, OutputFile, SourceInfo, Status

STATUS_MAP: Dict[str, Status] = {
    "waiting": Status.QUEUED,
    "pending": Status.QUEUED,
    "assigning": Status.QUEUED,
    "processing": Status.STARTED,
    "finished": Status.FINISHED,
    "cancelled": Status.CANCELED,
    "failed": Status.FAILED,
}


def map_status(state: Optional[str]) -> Status:
    """
    映射远程状态字符串（区分大小写）

    未知状态一律视为失败，不会被当作成功上报
    """
    return STATUS_MAP.get(state, Status.FAILED)


def _to_int(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _to_float(value: Any) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # inf / nan 视为缺失
    return number if math.isfinite(number) else None


def _progress(raw: Dict[str, Any], status: Status) -> float:
    progress = _to_float(raw.get("progress"))
    if progress is None:
        return 100.0 if status == Status.FINISHED else 0.0
    return min(max(progress, 0.0), 100.0)


def _source_info(raw: Dict[str, Any]) -> SourceInfo:
    media = raw.get("input_media_file") or {}
    duration_ms = _to_float(media.get("duration_in_ms")) or 0.0
    return SourceInfo(
        duration=duration_ms / 1000,
        width=_to_int(media.get("width")),
        height=_to_int(media.get("height")),
        video_codec=media.get("video_codec") or "",
    )


def _output_file(media: Dict[str, Any]) -> OutputFile:
    return OutputFile(
        path=media.get("url") or "",
        container=media.get("format") or "",
        video_codec=media.get("video_codec") or "",
        width=_to_int(media.get("width")),
        height=_to_int(media.get("height")),
    )


def assemble_job_status(
    provider_name: str,
    provider_job_id: str,
    raw: Dict[str, Any],
    destination: str = "/",
) -> JobStatus:
    """
    组装任务状态

    Args:
        provider_name: provider 名称
        provider_job_id: 远程任务 ID
        raw: 远程返回的状态文档，原样放入 provider_status
        destination: 任务输出目录

    Returns:
        新建的 JobStatus
    """
    status = map_status(raw.get("state"))
    files = [_output_file(media) for media in raw.get("output_media_files") or []]
    return JobStatus(
        provider_name=provider_name,
        provider_job_id=provider_job_id,
        status=status,
        progress=_progress(raw, status),
        source_info=_source_info(raw),
        provider_status=copy.deepcopy(raw),
        output=JobOutput(destination=destination, files=files),
    )
