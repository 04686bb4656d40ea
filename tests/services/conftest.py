# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from sqlalchemy import text
from starlette.testclient import TestClient

from costar.services.api.app import create_app
from costar.services.api.deps import read_session

APP_SCHEMA = "costar"


@pytest.fixture()
def api_session(db_engine):
    """One connection/transaction per test, rolled back at the end."""
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True, join_transaction_mode="create_savepoint")
    session.execute(text(f'SET search_path TO "{APP_SCHEMA}", public'))
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_app():
    app = create_app()
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(api_app, api_session):
    """
    A TestClient whose `read_session` dependency yields the test's Session,
    so rows seeded through `api_session` are visible to every request.
    """
    def _override():
        yield api_session

    api_app.dependency_overrides[read_session] = _override
    with TestClient(api_app) as client:
        yield client
