# config.py
from __future__ import annotations

import json
import os
import pathlib
from dataclasses import dataclass, field
from typing import Optional, Sequence

from dotenv import load_dotenv

from errors import MissingInputError

# ─────────────────────────────────────────────────────────────
# .env (project root; already-set environment variables win)
# ─────────────────────────────────────────────────────────────
BASE_DIR = pathlib.Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

SECRET_NAMES = ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN")

# keys inside an authorized-user token file (Credentials.to_json())
_TOKEN_FILE_KEYS = {
    "GOOGLE_CLIENT_ID": "client_id",
    "GOOGLE_CLIENT_SECRET": "client_secret",
    "GOOGLE_REFRESH_TOKEN": "refresh_token",
}


@dataclass(frozen=True)
class SyncConfig:
    """Which table/fields the sync reads and writes."""

    table_name: str = "Companies"
    folder_name_field: str = "Company Name"
    output_url_field: str = "Drive Folder"
    drive_status_field: str = "Drive Status"
    # empty → folder goes to the My Drive root
    parent_folder_id: str = ""


@dataclass(frozen=True)
class GoogleCredentials:
    client_id: str = field(repr=False)
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)


def load_sync_config() -> SyncConfig:
    defaults = SyncConfig()
    return SyncConfig(
        table_name=os.getenv("SYNC_TABLE_NAME", defaults.table_name),
        folder_name_field=os.getenv("SYNC_FOLDER_NAME_FIELD", defaults.folder_name_field),
        output_url_field=os.getenv("SYNC_OUTPUT_URL_FIELD", defaults.output_url_field),
        drive_status_field=os.getenv("SYNC_DRIVE_STATUS_FIELD", defaults.drive_status_field),
        parent_folder_id=os.getenv("GDRIVE_PARENT_FOLDER_ID", defaults.parent_folder_id).strip(),
    )


def token_file_path() -> pathlib.Path:
    path = pathlib.Path(os.getenv("GOOGLE_OAUTH_TOKEN_FILE", "token.json"))
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def _read_token_file(path: pathlib.Path) -> dict:
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise MissingInputError(f"Token file is not valid JSON: {path}") from exc


def load_credentials(token_file: Optional[pathlib.Path] = None) -> GoogleCredentials:
    """
    Secrets come from the environment first, then from the authorized-user
    token file written by gdrive_oauth_bootstrap.py.
    """
    stored = _read_token_file(token_file or token_file_path())
    values = {}
    for name in SECRET_NAMES:
        value = os.getenv(name) or stored.get(_TOKEN_FILE_KEYS[name])
        if not value:
            raise MissingInputError(f"Missing secret: {name}")
        values[name] = value
    return GoogleCredentials(
        client_id=values["GOOGLE_CLIENT_ID"],
        client_secret=values["GOOGLE_CLIENT_SECRET"],
        refresh_token=values["GOOGLE_REFRESH_TOKEN"],
    )


def read_record_id(argv: Sequence[str]) -> Optional[str]:
    """Record id from the first positional argument, else RECORD_ID."""
    if argv:
        return argv[0].strip() or None
    value = os.getenv("RECORD_ID", "").strip()
    return value or None
