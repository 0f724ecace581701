"""
Zencoder HTTP 客户端

对 Zencoder v2 API 的薄封装，只负责发送请求和返回原始文档
"""

import json
from typing import Any, Dict, Optional

import requests

from zencoder_provider.core.errors import TransportError
from zencoder_provider.utils.config import config
from zencoder_provider.utils.logger import get_logger

logger = get_logger(__name__)


class ZencoderClient:
    """
    Zencoder API 客户端

    所有请求失败（网络错误或非 2xx 响应）都抛出 TransportError
    """

    def __init__(self, api_key: str, api_url: str = None, timeout: float = None):
        """
        初始化客户端

        Args:
            api_key: Zencoder API Key
            api_url: API 地址
            timeout: 请求超时（秒）
        """
        self.api_key = api_key
        self.api_url = (api_url or config.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Zencoder-Api-Key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.api_url}/{path}"
        data = json.dumps(payload) if payload is not None else None
        try:
            r = requests.request(method, url, headers=self._headers(), data=data, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"请求 Zencoder 失败: {method} {path}: {e}")
            raise TransportError(f"{method} {path}: {e}") from e

        if not 200 <= r.status_code < 300:
            logger.error(f"Zencoder 返回错误: {method} {path}: HTTP {r.status_code}")
            raise TransportError(
                f"{method} {path}: HTTP {r.status_code}: {r.text}", status_code=r.status_code
            )

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise TransportError(f"{method} {path}: 无效的 JSON 响应", status_code=r.status_code) from e

    def submit(self, job_document: Dict[str, Any]) -> Any:
        """
        提交转码任务

        Args:
            job_document: 任务文档 {"input": ..., "outputs": [...]}

        Returns:
            远程任务 ID
        """
        result = self._request("POST", "jobs", job_document) or {}
        if "id" not in result:
            raise TransportError("POST jobs: 响应中没有任务 ID")
        return result["id"]

    def fetch_status(self, job_id: str) -> Dict[str, Any]:
        """
        获取任务状态

        合并任务详情和任务进度两个文档，进度文档中的 state / progress 优先

        Args:
            job_id: 远程任务 ID

        Returns:
            原始状态文档
        """
        details = self._request("GET", f"jobs/{job_id}.json") or {}
        document = dict(details.get("job", details))

        progress = self._request("GET", f"jobs/{job_id}/progress.json") or {}
        if progress.get("state"):
            document["state"] = progress["state"]
        if progress.get("progress") is not None:
            document["progress"] = progress["progress"]
        return document

    def cancel(self, job_id: str) -> None:
        """取消任务"""
        self._request("PUT", f"jobs/{job_id}/cancel.json")

    def ping(self) -> None:
        """检查 API 可用且 API Key 有效"""
        self._request("GET", "account")
