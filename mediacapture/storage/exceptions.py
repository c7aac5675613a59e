class StorageError(Exception):
    """Base exception for uploaded-bytes storage errors."""


class StorageWriteError(StorageError):
    """Raised when uploaded bytes cannot be persisted."""


class StorageReadError(StorageError):
    """Raised when stored bytes cannot be read back."""
