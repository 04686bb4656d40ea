# costar/database/core/main.py
from __future__ import annotations

from typing import Iterator, List

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from costar.common.logging import get_logger
from costar.common.settings import get_settings
from costar.domain.errors import StorageUnavailableError

log = get_logger(__name__)
_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin", "meta_data")

# Isolation used for search reads: one consistent view of the adjacency tables.
SNAPSHOT_ISOLATION = "REPEATABLE READ"

# Driver and pool failures that mean the store cannot be reached right now.
STORAGE_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_settings.db_schema if _settings.db_schema and _settings.db_schema.lower() != "public" else None,
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        name, metadata, *rest = args
        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}
        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


engine = create_engine(
    _settings.database_url,
    echo=_settings.db.echo,
    pool_size=_settings.db.pool_size,
    max_overflow=_settings.db.max_overflow,
    pool_pre_ping=_settings.db.pool_pre_ping,
    pool_recycle=_settings.db.pool_recycle,
    future=True,
)

# App schema first, then public (so extensions remain visible)
if _settings.db_schema and _settings.db_schema.lower() != "public":
    @event.listens_for(engine, "connect")
    def _set_search_path(dbapi_conn, _):
        with dbapi_conn.cursor() as cur:
            cur.execute(f'SET search_path TO "{_settings.db_schema}", public')


SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)


def snapshot_session() -> Iterator[Session]:
    """
    Read-only Session pinned to a single REPEATABLE READ transaction, so every
    neighbor lookup of one search sees the same snapshot even while the
    aggregation job rewrites collaboration rows. Always rolled back.

    Raises StorageUnavailableError when the transaction cannot be opened.
    """
    session: Session = SessionLocal()
    try:
        try:
            session.connection(execution_options={"isolation_level": SNAPSHOT_ISOLATION})
        except STORAGE_ERRORS as e:
            log.warning("could not open snapshot session: %s", e)
            raise StorageUnavailableError(f"adjacency store unavailable: {e}") from e
        yield session
    finally:
        session.rollback()
        session.close()
