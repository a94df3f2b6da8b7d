from pathlib import Path

import pytest

from mediaguard.config.settings import Settings
from mediaguard.storage.exceptions import StorageOperationError

IMAGE_PLACEHOLDER_BYTES = b"\x89PNG placeholder"
VIDEO_PLACEHOLDER_BYTES = b"\x00\x00\x00\x18ftypmp42 placeholder"


class InMemoryBucket:
    """Stands in for MediaBucket, keeping object bytes in a dict."""

    def __init__(self, objects: dict[str, bytes] | None = None, name: str = "uploads") -> None:
        self.name = name
        self.objects: dict[str, bytes] = dict(objects or {})
        self.calls: list[tuple[str, str]] = []

    def delete(self, path: str) -> None:
        self.calls.append(("delete", path))
        if path not in self.objects:
            raise StorageOperationError(f"delete of '{path}' failed: 404")
        del self.objects[path]

    def download_to(self, path: str, destination: Path) -> None:
        self.calls.append(("download", path))
        if path not in self.objects:
            raise StorageOperationError(f"download of '{path}' failed: 404")
        destination.write_bytes(self.objects[path])

    def upload_from(self, source: Path, path: str) -> None:
        self.calls.append(("upload", path))
        self.objects[path] = source.read_bytes()

    def signed_download_url(self, path: str, ttl_seconds: int) -> str:
        self.calls.append(("sign", path))
        return f"https://storage.example.com/{self.name}/{path}?X-Goog-Expires={ttl_seconds}"

    @property
    def mutations(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] in ("delete", "upload")]


@pytest.fixture()
def bucket() -> InMemoryBucket:
    return InMemoryBucket(
        {
            "prohibited.png": IMAGE_PLACEHOLDER_BYTES,
            "annotate.mp4": VIDEO_PLACEHOLDER_BYTES,
            "users/u1/photo.jpg": b"original jpeg",
            "publishes/station/42/clip.mp4": b"original mp4",
        }
    )


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        storage_bucket="uploads",
        tmp_root=tmp_path / "tmp",
        stream_base_url="https://api.example.com/accounts",
        stream_account_id="acc-1",
        stream_api_token="token-1",
    )
