# costar/services/api/routers/people.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from costar.common.settings import get_settings
from costar.domain.enums import PathErrorKind
from costar.domain.errors import StorageUnavailableError
from costar.services.api.deps import get_path_search
from costar.services.schemas.paths import CollaboratorRead, PathErrorRead
from costar.services.search.service import PathSearchService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/people", tags=["people"])


@router.get("/{person_id}/collaborators", response_model=List[CollaboratorRead])
def list_collaborators(
    person_id: int = Path(...),
    limit: int = Query(50, ge=1, le=500),
    svc: PathSearchService = Depends(get_path_search),
) -> List[CollaboratorRead]:
    try:
        if not svc.graph.person_exists(person_id):
            raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Person not found")
        nbs = svc.graph.neighbors(person_id, limit=limit)
    except StorageUnavailableError as e:
        raise HTTPException(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            detail=PathErrorRead(
                kind=PathErrorKind.storage_unavailable, message=str(e), retryable=True
            ).model_dump(mode="json"),
        ) from e
    return [CollaboratorRead.model_validate(n) for n in nbs]
