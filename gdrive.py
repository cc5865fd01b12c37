# gdrive.py — Drive v3 folder creation
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import build_http

from errors import FolderCreationError

log = logging.getLogger("drivesync.gdrive")

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
FOLDER_FIELDS = "id,webViewLink"
FOLDER_URL_TEMPLATE = "https://drive.google.com/drive/folders/{}"


def drive_service(access_token: str, http: Optional[httplib2.Http] = None):
    # bearer-only credentials cannot refresh, so a 401 must surface as an HttpError
    authed = AuthorizedHttp(
        Credentials(token=access_token),
        http=http or build_http(),
        refresh_status_codes=(),
    )
    return build("drive", "v3", http=authed, cache_discovery=False)


def folder_metadata(name: str, parent_folder_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "name": name,
        "mimeType": FOLDER_MIME_TYPE,
        "parents": [parent_folder_id] if parent_folder_id else [],
    }


def _error_body(exc: HttpError) -> str:
    content = exc.content or b""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content)


def create_folder(access_token: str, name: str, parent_folder_id: str = "", service=None) -> str:
    """
    Create a folder named `name` and return its webViewLink.

    Not idempotent: calling twice creates two folders with the same name.
    HTTP, auth and transport failures all come out as FolderCreationError.
    """
    svc = service or drive_service(access_token)
    log.info('Creating folder: "%s"', name)
    try:
        created = svc.files().create(
            body=folder_metadata(name, parent_folder_id),
            fields=FOLDER_FIELDS,
            supportsAllDrives=True,
        ).execute()
    except HttpError as exc:
        status = getattr(exc.resp, "status", None)
        raise FolderCreationError(
            "Drive folder creation failed",
            status_code=int(status) if status is not None else None,
            body=_error_body(exc),
        ) from exc
    except GoogleAuthError as exc:
        raise FolderCreationError("Drive rejected the access token", status_code=401, body=str(exc)) from exc
    except (httplib2.HttpLib2Error, OSError) as exc:
        raise FolderCreationError(f"Drive request failed: {exc.__class__.__name__}", body=str(exc)) from exc

    folder_id = created.get("id")
    folder_url = created.get("webViewLink")
    if not folder_url:
        raise FolderCreationError(
            f"Drive response has no webViewLink (id={folder_id})",
            folder_url=FOLDER_URL_TEMPLATE.format(folder_id) if folder_id else None,
        )
    log.info("Folder created: id=%s url=%s", folder_id, folder_url)
    return folder_url
