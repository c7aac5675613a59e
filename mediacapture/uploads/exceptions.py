class UploadError(Exception):
    """Base exception for all upload lifecycle errors."""


class InvalidInputError(UploadError):
    """Raised when an upload request carries a bad kind, size, or file."""


class UploadNotFoundError(UploadError):
    """Raised when an upload record cannot be found in the store."""


class PreconditionFailedError(UploadError):
    """Raised when an operation is attempted on a record in the wrong state."""
