import json
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest

from mediaguard.config.settings import Settings
from mediaguard.context import AppContext
from mediaguard.storage.placeholder import PlaceholderReplacer
from mediaguard.transcoding.stream_client import StreamCopyClient


@pytest.fixture()
def stream_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def app_context(
    settings: Settings,
    bucket,  # type: ignore[no-untyped-def]
    stream_requests: list[httpx.Request],
) -> AppContext:
    """AppContext over the in-memory bucket, mocked classifiers and a mock stream API."""

    def stream_api(request: httpx.Request) -> httpx.Response:
        stream_requests.append(request)
        body = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "result": {"meta": body["meta"]}})

    return AppContext(
        settings=settings,
        bucket=bucket,
        replacer=PlaceholderReplacer(
            bucket,
            tmp_root=settings.tmp_root,
            mode=settings.replacement_mode,
        ),
        image_classifier=MagicMock(),
        video_classifier=MagicMock(),
        stream_client=StreamCopyClient(
            base_url=settings.stream_base_url,
            account_id=settings.stream_account_id,
            api_token=settings.stream_api_token,
            http_client=httpx.Client(transport=httpx.MockTransport(stream_api)),
        ),
    )


@pytest.fixture()
def temp_dir(settings: Settings) -> Path:
    return settings.tmp_root
