import httpx

from mediaguard.logging.logger import Log
from mediaguard.transcoding.exceptions import (
    TranscodeConfigurationError,
    TranscodeNetworkError,
    TranscodeRequestError,
)


class StreamCopyClient:
    """Client for the transcoding service's "copy from URL" endpoint.

    The service fetches the video itself from the given URL, so nothing is
    downloaded or uploaded locally.
    """

    def __init__(
        self,
        *,
        base_url: str,
        account_id: str,
        api_token: str,
        timeout_seconds: int = 30,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._account_id = account_id
        self._api_token = api_token
        self._http = http_client if http_client is not None else httpx.Client(
            timeout=timeout_seconds
        )

    @property
    def copy_url(self) -> str:
        return f"{self._base_url}/{self._account_id}/stream/copy"

    def copy_from_url(self, url: str, *, name: str, path: str) -> None:
        """Ask the service to ingest the video at url.

        Raises:
            TranscodeConfigurationError: account id or token not configured.
            TranscodeNetworkError: transport failure or timeout.
            TranscodeRequestError: non-2xx response.
        """
        self._check_configured()
        payload = {
            "url": url,
            "meta": {
                "name": name,
                "path": path,
                "contentURI": url,
                "contentRef": path,
            },
        }
        try:
            response = self._http.post(
                self.copy_url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self._api_token}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.TransportError as exc:
            raise TranscodeNetworkError(f"Transcoding service network error: {exc}") from exc

        if response.is_error:
            raise TranscodeRequestError(
                f"Transcoding service returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        Log.info("Transcoding requested", path=path, status=response.status_code)

    def close(self) -> None:
        self._http.close()

    def _check_configured(self) -> None:
        missing = [
            label
            for label, value in (
                ("stream_account_id", self._account_id),
                ("stream_api_token", self._api_token),
            )
            if not value
        ]
        if missing:
            raise TranscodeConfigurationError(
                f"Transcoding service is not configured, missing: {', '.join(missing)}"
            )
