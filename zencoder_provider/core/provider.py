"""
Zencoder provider 模块

把通用的预设、任务请求转换为 Zencoder 任务，并把远程状态转换回通用模型。
provider 本身不保存任务状态，每次调用只依赖参数和构造时的配置
"""

from typing import Any, Dict, List, Optional

from zencoder_provider.client.zencoder_client import ZencoderClient
from zencoder_provider.core.errors import InvalidConfig, ProviderPresetMappingMissing
from zencoder_provider.core.models import (
    Capabilities,
    Job,
    JobStatus,
    LocalPreset,
    Preset,
    Status,
    TranscodeProfile,
)
from zencoder_provider.storage.repository import PresetRepository, create_repository
from zencoder_provider.storage.store import LocalPresetStore
from zencoder_provider.transcode.output import build_output, job_destination
from zencoder_provider.transcode.presets import OutputSettings
from zencoder_provider.transcode.status import assemble_job_status
from zencoder_provider.utils.config import Config
from zencoder_provider.utils.logger import get_logger

logger = get_logger(__name__)

NAME = "zencoder"

CAPABILITIES = Capabilities(
    input_formats=("prores", "h264"),
    output_formats=("mp4", "hls", "webm"),
    destinations=("akamai", "s3"),
)


def normalize_job_id(value: Any) -> str:
    """
    规范化远程任务 ID

    整数直接转为字符串，形如 ".../jobs/123" 的复合 ID 只保留最后一段
    """
    job_id = str(value).strip().rstrip("/")
    return job_id.rsplit("/", 1)[-1]


class ZencoderProvider:
    """
    Zencoder provider

    负责预设管理、任务提交、状态查询和取消
    """

    name = NAME

    def __init__(self, config: Config, client, repository: PresetRepository):
        """
        初始化 provider

        Args:
            config: 配置，构造后只读
            client: 传输客户端，需要提供 submit / fetch_status / cancel / ping
            repository: 本地预设仓库
        """
        self.config = config
        self.client = client
        self.store = LocalPresetStore(repository)

    def create_preset(self, preset: Preset) -> str:
        """保存本地预设，返回预设名称"""
        return self.store.create_preset(preset)

    def get_preset(self, name: str) -> LocalPreset:
        """读取本地预设"""
        return self.store.get_preset(name)

    def delete_preset(self, name: str) -> None:
        """删除本地预设"""
        self.store.delete_preset(name)

    def list_presets(self) -> List[str]:
        return self.store.list_presets()

    def build_output(self, job: Job, preset: Preset, output_file_name: str, streaming_params=None) -> OutputSettings:
        """按配置中的输出目标组装单个输出"""
        return build_output(job, preset, output_file_name, self.config.destination, streaming_params)

    def _build_outputs(self, job: Job, profile: TranscodeProfile) -> List[Dict[str, Any]]:
        outputs = []
        for output in profile.outputs:
            preset_map = output.preset
            if not preset_map.provider_mapping.get(self.name):
                raise ProviderPresetMappingMissing(preset_map.name, self.name)
            local_preset = self.get_preset(preset_map.name)
            settings = self.build_output(job, local_preset.preset, output.file_name, profile.streaming_params)
            outputs.append(settings.to_dict())
        return outputs

    def transcode(self, job: Job, profile: TranscodeProfile) -> JobStatus:
        """
        提交转码任务

        提交成功后把远程任务 ID 写入 job.provider_job_id

        Args:
            job: 转码任务
            profile: 转码配置

        Returns:
            排队状态的 JobStatus
        """
        document = {
            "input": profile.source_media,
            "outputs": self._build_outputs(job, profile),
        }
        logger.info(f"提交任务 {job.id}: {len(document['outputs'])} 个输出")

        provider_job_id = normalize_job_id(self.client.submit(document))
        job.provider_job_id = provider_job_id
        logger.info(f"任务 {job.id} 已提交，Zencoder 任务 ID: {provider_job_id}")

        return JobStatus(
            provider_name=self.name,
            provider_job_id=provider_job_id,
            status=Status.QUEUED,
        )

    def job_status(self, job: Job) -> JobStatus:
        """
        查询任务状态

        Raises:
            TransportError: 远程查询失败（包括任务 ID 不存在）
        """
        raw = self.client.fetch_status(job.provider_job_id)
        status = assemble_job_status(
            self.name,
            job.provider_job_id,
            raw,
            destination=job_destination(self.config.destination, job.id),
        )
        logger.debug(f"任务 {job.provider_job_id} 状态: {status.status.value} ({status.progress:.0f}%)")
        return status

    def cancel_job(self, provider_job_id: str) -> None:
        """取消任务"""
        self.client.cancel(provider_job_id)
        logger.info(f"已取消任务: {provider_job_id}")

    def healthcheck(self) -> None:
        """健康检查，失败时抛出 TransportError"""
        self.client.ping()

    def capabilities(self) -> Capabilities:
        """固定的能力声明"""
        return CAPABILITIES


def zencoder_factory(config: Config, client=None, repository: Optional[PresetRepository] = None) -> ZencoderProvider:
    """
    根据配置创建 provider

    Args:
        config: 配置
        client: 传输客户端，默认根据配置创建 ZencoderClient
        repository: 预设仓库，默认根据 config.preset_store 创建

    Raises:
        InvalidConfig: 缺少 API Key
    """
    if not config.api_key:
        raise InvalidConfig("zencoder: api key is required")
    if client is None:
        client = ZencoderClient(config.api_key, config.api_url, config.request_timeout)
    if repository is None:
        repository = create_repository(config.preset_store)
    return ZencoderProvider(config, client, repository)
