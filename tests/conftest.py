"""Shared pytest fixtures: in-memory database, API client, fixed clocks."""

import os

# Configure before pvtracker is imported so no file database or Redis is touched
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pvtracker.database import Base, get_db
from pvtracker.main import app
from pvtracker.models import Installation, ProductionReport


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def _fk_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def installation(db):
    inst = Installation(
        longitude=14.29,
        latitude=48.31,
        address="Hauptplatz 1, 4020 Linz",
        owner_name="Test Owner",
        is_active=True,
    )
    db.add(inst)
    db.commit()
    db.refresh(inst)
    return inst


@pytest.fixture
def add_report(db):
    """Insert a report directly, bypassing the ingestion clock."""

    def _add(installation_id, timestamp, produced=100.0, household=10.0, battery=5.0, grid=1.0):
        report = ProductionReport(
            timestamp=timestamp,
            produced_wattage=produced,
            household_wattage=household,
            battery_wattage=battery,
            grid_wattage=grid,
            installation_id=installation_id,
        )
        db.add(report)
        db.commit()
        db.refresh(report)
        return report

    return _add


def fixed_clock(*args):
    moment = datetime(*args, tzinfo=timezone.utc)
    return lambda: moment
