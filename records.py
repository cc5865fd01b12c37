# records.py — read/update one record by id, addressed by field (column) names
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from sqlalchemy import Table, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import SyncConfig
from db import Base
from errors import RecordNotFoundError, RecordUpdateError

log = logging.getLogger("drivesync.records")


def _table(config: SyncConfig) -> Table:
    table = Base.metadata.tables.get(config.table_name)
    if table is None:
        raise KeyError(config.table_name)
    return table


def get_record(db: Session, config: SyncConfig, record_id: str) -> Dict[str, Any]:
    """Return {field name: value} for one record; raise RecordNotFoundError if absent."""
    try:
        table = _table(config)
    except KeyError:
        raise RecordNotFoundError(f"Table not found: {config.table_name}") from None

    row = db.execute(select(table).where(table.c.id == record_id)).mappings().first()
    if row is None:
        raise RecordNotFoundError(f"Record not found in table {config.table_name}: {record_id}")
    return {col.name: row[col] for col in table.columns}


def update_record(db: Session, config: SyncConfig, record_id: str, fields: Mapping[str, Any]) -> None:
    """
    Write all `fields` to one record in a single UPDATE + commit.

    Raises RecordUpdateError for an unknown table/field, an unknown record id,
    or a write the database rejects (the session is rolled back).
    """
    try:
        table = _table(config)
    except KeyError:
        raise RecordUpdateError(f"Table not found: {config.table_name}") from None

    by_name = {col.name: col for col in table.columns}
    unknown = [name for name in fields if name not in by_name]
    if unknown:
        raise RecordUpdateError(f"Unknown field(s) in {config.table_name}: {', '.join(unknown)}")

    stmt = (
        update(table)
        .where(table.c.id == record_id)
        .values({by_name[name]: value for name, value in fields.items()})
    )
    try:
        result = db.execute(stmt)
        if result.rowcount == 0:
            db.rollback()
            raise RecordUpdateError(f"Record not found in table {config.table_name}: {record_id}")
        db.commit()
    except (SQLAlchemyError, LookupError) as exc:
        db.rollback()
        raise RecordUpdateError(f"Record update rejected: {exc}") from exc

    log.info("Record %s updated (%s).", record_id, ", ".join(fields))
