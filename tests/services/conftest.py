# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from medialibrary.services.api.app import create_app
from medialibrary.services.api.deps import transactional_session


@pytest.fixture()
def api_client(db_engine):
    """
    A TestClient whose FastAPI dependency `transactional_session` is overridden
    to yield a single SQLAlchemy Session bound to the test engine/transaction.
    All API calls in one test share the same session (so POST -> GET works).
    Each request runs in a SAVEPOINT, committed or rolled back like the real
    per-request transaction; everything is rolled back at the end of the test.
    """
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(
        bind=conn,
        future=True,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )

    app = create_app()

    def _override():
        # same session for every request in this test, one SAVEPOINT per request
        with session.begin():
            yield session

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        session.close()
        trans.rollback()
        conn.close()
