# errors.py
from __future__ import annotations

from typing import Optional


class FolderSyncError(RuntimeError):
    """Base class for every failure of the folder sync flow."""


class MissingInputError(FolderSyncError):
    pass


class RecordNotFoundError(FolderSyncError):
    pass


class RecordUpdateError(FolderSyncError):
    pass


class RemoteCallError(FolderSyncError):
    """Non-success answer from a Google endpoint. Keeps status and body text."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        msg = super().__str__()
        if self.status_code is not None:
            msg = f"{msg} (HTTP {self.status_code})"
        if self.body:
            msg = f"{msg}: {self.body}"
        return msg


class AuthRefreshError(RemoteCallError):
    pass


class FolderCreationError(RemoteCallError):
    """folder_url is set when Drive created the folder but the answer was unusable."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
        folder_url: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, body=body)
        self.folder_url = folder_url
