import tempfile
from pathlib import Path, PurePosixPath
from typing import ClassVar

from mediaguard.logging.logger import Log
from mediaguard.storage.bucket import MediaBucket


class PlaceholderReplacer:
    """Swaps the bytes of a flagged object for a placeholder asset.

    Modes:
        delete_then_upload: delete the original, then upload the placeholder
            to the same path. Between the two calls the path is empty, and it
            stays empty if the upload fails.
        overwrite: upload the placeholder over the original in one write.
    """

    MODES: ClassVar[list[str]] = ["delete_then_upload", "overwrite"]

    def __init__(
        self,
        bucket: MediaBucket,
        tmp_root: Path,
        mode: str = "delete_then_upload",
    ) -> None:
        mode = mode.lower()
        if mode not in self.MODES:
            raise ValueError(f"Unknown replacement mode '{mode}'. Choose from: {self.MODES}")
        self._bucket = bucket
        self._tmp_root = tmp_root
        self._mode = mode

    @property
    def mode(self) -> str:
        return self._mode

    def replace(self, path: str, placeholder_path: str) -> None:
        """Leave the placeholder's bytes at path. The placeholder itself is never mutated."""
        if self._mode == "delete_then_upload":
            self._bucket.delete(path)
            Log.info("Deleted flagged object", path=path)

        temp_file = self._create_temp_file(path)
        try:
            self._bucket.download_to(placeholder_path, temp_file)
            Log.info("The replacement file has been downloaded", temp_file=temp_file)
            self._bucket.upload_from(temp_file, path)
            Log.info("Uploaded the replacement file", path=path)
        finally:
            self._cleanup(temp_file)

    def _create_temp_file(self, path: str) -> Path:
        # The object name is uploader-controlled, so it only contributes the suffix.
        self._tmp_root.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=self._tmp_root,
            prefix="placeholder-",
            suffix=PurePosixPath(path).suffix,
            delete=False,
        ) as handle:
            return Path(handle.name)

    @staticmethod
    def _cleanup(temp_file: Path) -> None:
        try:
            temp_file.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not remove temp file {temp_file}: {exc}")
            return
        Log.debug("Unlinked the downloaded file", temp_file=temp_file)
