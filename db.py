# db.py
from __future__ import annotations

import os
import secrets
import enum as pyenum
from typing import Any, Dict

from sqlalchemy import (
    create_engine,
    Column,
    String,
    DateTime,
    Text,
    Enum as SAEnum,
    func,
)
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base, sessionmaker

from config import BASE_DIR  # importing config loads .env

# ─────────────────────────────────────────────────────────────
# Connection
# ─────────────────────────────────────────────────────────────
PG_VARS = ("PG_HOST", "PG_USER", "PG_PASSWORD", "PG_PORT", "PG_DB")


def database_url() -> str:
    """DATABASE_URL, else a Postgres URL from PG_*, else data/app.db."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    pg = {name: os.getenv(name) for name in PG_VARS}
    if all(pg.values()):
        return URL.create(
            "postgresql+psycopg",
            username=pg["PG_USER"],
            password=pg["PG_PASSWORD"],
            host=pg["PG_HOST"],
            port=int(pg["PG_PORT"]),
            database=pg["PG_DB"],
            query={"sslmode": "require"},
        ).render_as_string(hide_password=False)

    sqlite_path = BASE_DIR / "data" / "app.db"
    sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{sqlite_path}"


def connect_args_for(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    # PgBouncer transaction mode: no server-side prepared statements
    return {"prepare_threshold": None}


_url = database_url()
engine = create_engine(_url, pool_pre_ping=True, connect_args=connect_args_for(_url), future=True)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

Base = declarative_base()

# ─────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────
class DriveStatus(pyenum.Enum):
    # single-select label; the sync only ever writes this one
    synced = "Synced"


def new_record_id() -> str:
    return "rec" + secrets.token_hex(7)

# ─────────────────────────────────────────────────────────────
# Models
#  Column names are the field names the sync config refers to;
#  the Python attribute names are only for ORM convenience.
# ─────────────────────────────────────────────────────────────
class Company(Base):
    __tablename__ = "Companies"

    id = Column(String(32), primary_key=True, default=new_record_id)

    name = Column("Company Name", String(255), nullable=True)
    drive_folder = Column("Drive Folder", Text, nullable=True)
    drive_status = Column(
        "Drive Status",
        SAEnum(
            DriveStatus,
            name="drive_status_enum",
            validate_strings=True,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        status = self.drive_status.value if self.drive_status else None
        return f"<Company id={self.id} name={self.name!r} status={status}>"

# ─────────────────────────────────────────────────────────────
# Utilities
# ─────────────────────────────────────────────────────────────
def init_db(bind=None) -> None:
    """
    Create missing tables (call after all models are declared).
    Existing tables are not altered.
    """
    Base.metadata.create_all(bind=bind or engine)
