# costar/services/api/deps.py
from __future__ import annotations
from http import HTTPStatus
from typing import Generator
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from costar.database.core.main import snapshot_session
from costar.domain.enums import PathErrorKind
from costar.domain.errors import StorageUnavailableError
from costar.services.schemas.paths import PathErrorRead
from costar.services.search.service import PathSearchService


def read_session() -> Generator[Session, None, None]:
    """
    Request-scoped, read-only session. Every query a request makes runs in
    one REPEATABLE READ transaction that is rolled back afterwards.
    An unreachable store answers 503 with a retryable `storage_unavailable`.

    Usage in routers:
      def endpoint(db: Session = Depends(read_session)):
          ...
    """
    try:
        yield from snapshot_session()
    except StorageUnavailableError as e:
        raise HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=PathErrorRead(
                kind=PathErrorKind.storage_unavailable, message=str(e), retryable=True
            ).model_dump(mode="json"),
        ) from e


def get_path_search(db: Session = Depends(read_session)) -> PathSearchService:
    return PathSearchService(db)
