"""Error vocabulary shared by every storage backend.

Backends translate their native failures (``OSError``, botocore
``ClientError``, ``SQLAlchemyError``) into these exceptions, so the web layer
resolves a status code from one table instead of per-route special cases.
"""

from __future__ import annotations


class FileStoreError(Exception):
    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class InvalidEncodingError(FileStoreError):
    """Payload, name or source bytes are not valid UTF-8."""


class InvalidNameError(FileStoreError):
    """Name is empty, absolute, or escapes its root."""


class NotFoundError(FileStoreError):
    """Stored entry does not exist."""


class SourceNotFoundError(NotFoundError):
    """Intake file requested by a put does not exist."""


class BackendNotEnabledError(FileStoreError):
    pass


class ReadError(FileStoreError):
    pass


class ProvisionError(FileStoreError):
    pass


class TransferError(FileStoreError):
    pass


class DecodeError(FileStoreError):
    pass


ERROR_STATUS: dict[type[FileStoreError], int] = {
    InvalidEncodingError: 400,
    InvalidNameError: 400,
    SourceNotFoundError: 400,
    NotFoundError: 404,
    BackendNotEnabledError: 404,
    ReadError: 500,
    ProvisionError: 500,
    TransferError: 500,
    DecodeError: 500,
}


def status_for(exc: FileStoreError) -> int:
    """Resolve the HTTP status for *exc*, most specific class first."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 500
