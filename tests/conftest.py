import os

# must be set before db.py is imported
os.environ["DATABASE_URL"] = "sqlite://"
for _name in ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN", "RECORD_ID"):
    os.environ.pop(_name, None)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from config import GoogleCredentials, SyncConfig
from db import Base, Company
from tests.helpers import CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN


@pytest.fixture
def db():
    engine = create_engine("sqlite://", future=True)
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, future=True)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def config():
    return SyncConfig()


@pytest.fixture
def credentials():
    return GoogleCredentials(
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        refresh_token=REFRESH_TOKEN,
    )


@pytest.fixture
def add_company(db):
    def _add(name="Acme Corp"):
        company = Company(name=name)
        db.add(company)
        db.commit()
        return company

    return _add
