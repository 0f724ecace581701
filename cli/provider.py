#!/usr/bin/env python3
"""
Zencoder provider 命令行入口

管理本地预设、提交任务、查询任务状态
"""

import argparse
import json
import sys

from zencoder_provider.core.errors import ProviderError
from zencoder_provider.core.models import (
    Job,
    Preset,
    PresetMap,
    StreamingParams,
    TranscodeOutput,
    TranscodeProfile,
)
from zencoder_provider.core.provider import CAPABILITIES, NAME
from zencoder_provider.core.registry import default_registry
from zencoder_provider.utils.config import load_config
from zencoder_provider.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def _parse_output(value: str) -> TranscodeOutput:
    """解析 "文件名=预设名" 形式的输出参数"""
    file_name, sep, preset_name = value.partition("=")
    if not sep or not file_name or not preset_name:
        raise argparse.ArgumentTypeError(f"输出格式应为 文件名=预设名: {value}")
    return TranscodeOutput(
        file_name=file_name,
        preset=PresetMap(name=preset_name, provider_mapping={NAME: preset_name}),
    )


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Zencoder Provider - Zencoder 转码适配器",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  # 保存本地预设
  zp-provider --create-preset preset.json

  # 提交转码任务
  zp-provider --transcode job-1 --source s3://bucket/in.mov --output out.mp4=mp4_1080p

  # 查询任务状态
  zp-provider --job-status 123456
        """,
    )

    # 预设
    parser.add_argument("--create-preset", type=str, metavar="FILE", help="从 JSON 文件保存本地预设")
    parser.add_argument("--get-preset", type=str, metavar="NAME", help="查看本地预设")
    parser.add_argument("--delete-preset", type=str, metavar="NAME", help="删除本地预设")
    parser.add_argument("--list-presets", action="store_true", help="列出本地预设")

    # 任务
    parser.add_argument("--transcode", type=str, metavar="JOB_ID", help="提交转码任务")
    parser.add_argument("--source", "-s", type=str, help="源文件 URL")
    parser.add_argument(
        "--output", "-o", type=_parse_output, action="append", default=[], help="输出，格式: 文件名=预设名"
    )
    parser.add_argument("--segment-duration", type=int, default=0, help="HLS 分段时长（秒）")
    parser.add_argument("--job-status", type=str, metavar="PROVIDER_JOB_ID", help="查询任务状态")
    parser.add_argument("--job-id", type=str, default="", help="查询状态时使用的任务 ID")
    parser.add_argument("--cancel", type=str, metavar="PROVIDER_JOB_ID", help="取消任务")

    # 其他
    parser.add_argument("--healthcheck", action="store_true", help="检查 Zencoder API 是否可用")
    parser.add_argument("--capabilities", action="store_true", help="显示 provider 能力")

    # 配置
    parser.add_argument("--config", "-c", type=str, help="配置文件路径")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )
    return parser


def run(args) -> int:
    """执行命令，返回退出码"""
    actions = (
        args.capabilities, args.healthcheck, args.create_preset, args.get_preset, args.delete_preset,
        args.list_presets, args.transcode, args.job_status, args.cancel,
    )
    if not any(actions):
        return -1

    # 能力声明与配置无关
    if args.capabilities:
        _print_json(CAPABILITIES.to_dict())
        return 0

    cfg = load_config(args.config)
    if args.log_level:
        set_log_level(args.log_level)

    provider = default_registry().create(NAME, cfg)

    if args.healthcheck:
        provider.healthcheck()
        print("OK")
        return 0

    if args.create_preset:
        with open(args.create_preset, "r", encoding="utf-8") as f:
            preset = Preset.from_dict(json.load(f))
        print(provider.create_preset(preset))
        return 0

    if args.get_preset:
        _print_json(provider.get_preset(args.get_preset).to_dict())
        return 0

    if args.delete_preset:
        provider.delete_preset(args.delete_preset)
        return 0

    if args.list_presets:
        for name in provider.list_presets():
            print(name)
        return 0

    if args.transcode:
        if not args.source or not args.output:
            print("错误: 提交任务需要 --source 和至少一个 --output")
            return 2
        profile = TranscodeProfile(
            source_media=args.source,
            outputs=args.output,
            streaming_params=StreamingParams(segment_duration=args.segment_duration),
        )
        job = Job(id=args.transcode)
        status = provider.transcode(job, profile)
        _print_json(status.to_dict())
        return 0

    if args.job_status:
        status = provider.job_status(Job(id=args.job_id, provider_job_id=args.job_status))
        _print_json(status.to_dict())
        return 0

    if args.cancel:
        provider.cancel_job(args.cancel)
        return 0

    return -1


def main(argv=None):
    """命令行入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        code = run(args)
    except ProviderError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"\n✗ {e}")
        sys.exit(1)

    # 没有指定操作，显示帮助
    if code < 0:
        parser.print_help()
        return
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
