class TranscodeError(Exception):
    """Base exception for transcoding-service errors."""


class TranscodeConfigurationError(TranscodeError):
    """Raised when the account id or API token is missing."""


class TranscodeNetworkError(TranscodeError):
    """Raised when the transcoding service cannot be reached."""


class TranscodeRequestError(TranscodeError):
    """Raised when the transcoding service rejects the copy request."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
