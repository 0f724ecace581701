"""测试公共夹具"""

import copy

import pytest

from zencoder_provider.core.errors import TransportError
from zencoder_provider.core.models import AudioPreset, Preset, VideoPreset
from zencoder_provider.core.provider import ZencoderProvider
from zencoder_provider.storage.repository import MemoryPresetRepository
from zencoder_provider.utils.config import Config

FAKE_STATUS = {
    "id": 1234567890,
    "state": "processing",
    "progress": 10,
    "created_at": "2016-11-05T05:02:57Z",
    "finished_at": "2016-11-05T05:02:57Z",
    "updated_at": "2016-11-05T05:02:57Z",
    "submitted_at": "2016-11-05T05:02:57Z",
    "input_media_file": {
        "url": "http://nyt.net/input.mov",
        "format": "mov",
        "duration_in_ms": 10000,
        "width": 1920,
        "height": 1080,
        "video_codec": "ProRes422",
    },
    "output_media_files": [
        {
            "url": "http://nyt.net/output1.mp4",
            "format": "mp4",
            "video_codec": "h264",
            "width": 1920,
            "height": 1080,
        },
        {
            "url": "http://nyt.net/output2.webm",
            "format": "webm",
            "video_codec": "vp8",
            "width": 1080,
            "height": 720,
        },
    ],
}


class FakeZencoderClient:
    """模拟 Zencoder 客户端，记录所有调用"""

    def __init__(self, job_id=123, statuses=None):
        self.job_id = job_id
        self.statuses = statuses if statuses is not None else {"1234567890": FAKE_STATUS}
        self.submitted = []
        self.cancelled = []
        self.pinged = 0

    def submit(self, job_document):
        self.submitted.append(job_document)
        return self.job_id

    def fetch_status(self, job_id):
        if job_id not in self.statuses:
            raise TransportError(f"GET jobs/{job_id}.json: HTTP 404", status_code=404)
        return copy.deepcopy(self.statuses[job_id])

    def cancel(self, job_id):
        self.cancelled.append(job_id)

    def ping(self):
        self.pinged += 1


@pytest.fixture
def config():
    return Config(api_key="api-key-here")


@pytest.fixture
def fake_client():
    return FakeZencoderClient()


@pytest.fixture
def provider(config, fake_client):
    return ZencoderProvider(config, fake_client, MemoryPresetRepository())


@pytest.fixture
def mp4_preset():
    return Preset(
        name="mp4_1080p",
        description="my nice preset",
        container="mp4",
        rate_control="VBR",
        video=VideoPreset(
            profile="main",
            profile_level="3.1",
            bitrate="3500000",
            codec="h264",
            gop_mode="fixed",
            gop_size="90",
            height="1080",
        ),
        audio=AudioPreset(bitrate="128000", codec="aac"),
    )


@pytest.fixture
def fake_status():
    return copy.deepcopy(FAKE_STATUS)
