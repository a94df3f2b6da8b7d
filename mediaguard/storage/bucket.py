from datetime import timedelta
from pathlib import Path

import google.auth
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.auth.transport.requests import Request
from google.cloud import storage

from mediaguard.storage.exceptions import StorageOperationError

_STORAGE_ERRORS = (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError)


class MediaBucket:
    """Object operations on the single bucket that receives user uploads.

    Every failure surfaces as StorageOperationError naming the operation
    and the object path.
    """

    def __init__(
        self,
        bucket: storage.Bucket,
        signing_service_account_email: str = "",
    ) -> None:
        self._bucket = bucket
        self._signing_email = signing_service_account_email

    @property
    def name(self) -> str:
        return self._bucket.name

    def delete(self, path: str) -> None:
        try:
            self._bucket.blob(path).delete()
        except _STORAGE_ERRORS as exc:
            raise StorageOperationError(f"delete of '{path}' failed: {exc}") from exc

    def download_to(self, path: str, destination: Path) -> None:
        try:
            self._bucket.blob(path).download_to_filename(str(destination))
        except _STORAGE_ERRORS as exc:
            raise StorageOperationError(f"download of '{path}' failed: {exc}") from exc

    def upload_from(self, source: Path, path: str) -> None:
        try:
            self._bucket.blob(path).upload_from_filename(str(source))
        except _STORAGE_ERRORS as exc:
            raise StorageOperationError(f"upload to '{path}' failed: {exc}") from exc

    def signed_download_url(self, path: str, ttl_seconds: int) -> str:
        """Return a V4 read-only signed URL valid for ttl_seconds.

        When a signing service account is configured the signature is made
        through the IAM signBlob API, since runtime credentials on Cloud
        Functions carry no private key.
        """
        blob = self._bucket.blob(path)
        try:
            if self._signing_email:
                return blob.generate_signed_url(
                    version="v4",
                    expiration=timedelta(seconds=ttl_seconds),
                    method="GET",
                    service_account_email=self._signing_email,
                    access_token=self._access_token(),
                )
            return blob.generate_signed_url(
                version="v4",
                expiration=timedelta(seconds=ttl_seconds),
                method="GET",
            )
        except AttributeError as exc:
            # Raised by the client when the credentials hold no private key.
            raise StorageOperationError(
                f"signing URL for '{path}' failed: credentials cannot sign locally, "
                f"set SIGNING_SERVICE_ACCOUNT_EMAIL to sign through IAM ({exc})"
            ) from exc
        except _STORAGE_ERRORS as exc:
            raise StorageOperationError(f"signing URL for '{path}' failed: {exc}") from exc

    @staticmethod
    def _access_token() -> str:
        credentials, _ = google.auth.default()
        credentials.refresh(Request())
        return credentials.token
