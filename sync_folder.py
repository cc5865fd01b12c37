# sync_folder.py — create a Drive folder for one company record and link it back
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import requests
from sqlalchemy.orm import Session

from auth import refresh_access_token
from config import GoogleCredentials, SyncConfig, load_credentials, load_sync_config, read_record_id
from db import DriveStatus, SessionLocal, init_db
from errors import (
    AuthRefreshError,
    FolderCreationError,
    FolderSyncError,
    MissingInputError,
    RecordUpdateError,
)
from gdrive import create_folder, drive_service
from records import get_record, update_record

log = logging.getLogger("drivesync.sync")

SYNCED = "synced"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass
class SyncResult:
    record_id: str
    status: str
    folder_url: Optional[str] = None
    error: Optional[FolderSyncError] = None

    @property
    def ok(self) -> bool:
        return self.status != FAILED

    @property
    def orphaned_folder_url(self) -> Optional[str]:
        """URL of a folder that was created but never written back."""
        if self.status == FAILED:
            return self.folder_url
        return None


def sync_record(
    db: Session,
    record_id: Optional[str],
    *,
    config: SyncConfig,
    credentials: GoogleCredentials,
    http: Optional[requests.Session] = None,
    drive_factory: Optional[Callable[[str], object]] = None,
) -> SyncResult:
    """
    Missing input and unknown records raise. Failures of the token, Drive or
    write-back calls are logged and returned as a failed SyncResult.
    """
    if not record_id:
        raise MissingInputError("Missing input: recordId")

    log.info("Starting execution for record: %s", record_id)
    record = get_record(db, config, record_id)

    folder_name = record.get(config.folder_name_field)
    if isinstance(folder_name, str):
        folder_name = folder_name.strip()
    if not folder_name:
        log.warning("%s is empty. Skipping folder creation.", config.folder_name_field)
        return SyncResult(record_id=record_id, status=SKIPPED)

    factory = drive_factory or drive_service
    folder_url = None
    try:
        access_token = refresh_access_token(credentials, session=http)
        folder_url = create_folder(
            access_token,
            str(folder_name),
            config.parent_folder_id,
            service=factory(access_token),
        )
        update_record(
            db,
            config,
            record_id,
            {
                config.output_url_field: folder_url,
                config.drive_status_field: DriveStatus.synced,
            },
        )
    except (AuthRefreshError, FolderCreationError, RecordUpdateError) as exc:
        log.error("Sync failed for record %s: %s", record_id, exc)
        if isinstance(exc, FolderCreationError) and exc.folder_url:
            folder_url = exc.folder_url
        if folder_url:
            log.error("Folder %s was created but is not linked to record %s", folder_url, record_id)
        return SyncResult(record_id=record_id, status=FAILED, folder_url=folder_url, error=exc)

    log.info("Record %s synced: %s", record_id, folder_url)
    return SyncResult(record_id=record_id, status=SYNCED, folder_url=folder_url)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
        level=logging.INFO,
    )
    record_id = read_record_id(sys.argv[1:] if argv is None else argv)
    if not record_id:
        raise MissingInputError("Missing input: recordId")

    config = load_sync_config()
    credentials = load_credentials()

    init_db()
    with SessionLocal() as db:
        result = sync_record(db, record_id, config=config, credentials=credentials)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
