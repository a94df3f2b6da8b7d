class StorageError(Exception):
    """Base exception for all storage-related errors."""


class StorageOperationError(StorageError):
    """Raised when a bucket operation (delete, download, upload, sign) fails."""
