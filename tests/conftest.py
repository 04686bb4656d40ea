# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from testcontainers.postgres import PostgresContainer

from costar.common.settings import get_settings
from costar.database.models import Base  # <-- imports every model/table

APP_SCHEMA = "costar"

@pytest.fixture(scope="session")
def _postgres_container():
    with PostgresContainer(get_settings().test_db_image) as pg:
        # testcontainers defaults to psycopg2 in the URL; we ship psycopg (v3)
        url = pg.get_connection_url().replace("psycopg2", "psycopg")
        yield url

def _prepare_schema(engine: Engine, schema: str = APP_SCHEMA) -> None:
    with engine.begin() as conn:
        conn.execute(text(f'create schema if not exists "{schema}"'))
        conn.execute(text(f'set search_path to "{schema}", public'))

@pytest.fixture(scope="session")
def db_engine(_postgres_container) -> Engine:
    engine = create_engine(_postgres_container, future=True)
    _prepare_schema(engine, APP_SCHEMA)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
