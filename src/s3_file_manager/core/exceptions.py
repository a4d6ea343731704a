"""Exception hierarchy for s3-file-manager.

Errors raised here come from local validation only. Failures reported by S3
itself (missing keys, denied access, throttling) reach the caller as the
botocore exceptions they were raised as.
"""


class FileManagerError(Exception):
    """Base exception for all s3-file-manager errors."""

    status = 500

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(FileManagerError):
    """Raised when validation fails."""

    status = 400


class InvalidNameError(ValidationError):
    """Raised when a key breaks the trailing-slash folder/file convention."""

    pass


class NotEmptyError(ValidationError):
    """Raised when deleting a folder that holds more than its marker object."""

    pass


class NotInitializedError(FileManagerError):
    """Raised when the module-level API is used before initialize()."""

    pass
