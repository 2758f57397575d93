# tests/conftest.py
from __future__ import annotations
import os

# Must be set before anything imports medialibrary: the engine and the
# metadata schema are built from settings at import time.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from medialibrary.common.settings import get_settings
from medialibrary.database.models import Base  # <-- imports every model onto the metadata


def _sqlite_engine() -> Engine:
    # one shared in-memory database for the whole session
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    # let SQLAlchemy drive BEGIN so SAVEPOINT / rollback behave (pysqlite defers BEGIN otherwise)
    @event.listens_for(engine, "connect")
    def _no_pysqlite_begin(dbapi_conn, _):
        dbapi_conn.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


@pytest.fixture(scope="session")
def db_engine():
    if get_settings().use_testcontainers:
        from testcontainers.postgres import PostgresContainer

        with PostgresContainer(get_settings().test_db_image) as pg:
            # Force psycopg (v3) driver in the URL returned by testcontainers
            url = pg.get_connection_url().replace("psycopg2", "psycopg")
            engine = create_engine(url, future=True)
            Base.metadata.create_all(bind=engine)
            try:
                yield engine
            finally:
                Base.metadata.drop_all(bind=engine)
                engine.dispose()
        return

    engine = _sqlite_engine()
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
