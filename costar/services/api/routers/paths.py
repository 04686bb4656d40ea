# costar/services/api/routers/paths.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from costar.common.settings import get_settings
from costar.domain.entities.path import PathError, PathResult
from costar.domain.enums import PathErrorKind
from costar.services.api.deps import get_path_search
from costar.services.schemas.paths import (
    HopRead, MovieRef, PathErrorRead, PathSearchRead, PersonRef, SearchStatsRead,
)
from costar.services.search.service import PathSearchService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/paths", tags=["paths"])

_ERROR_STATUS = {
    PathErrorKind.invalid_input: HTTPStatus.NOT_FOUND,
    PathErrorKind.timeout: HTTPStatus.GATEWAY_TIMEOUT,
    PathErrorKind.storage_unavailable: HTTPStatus.SERVICE_UNAVAILABLE,
}


def _hops(svc: PathSearchService, result: PathResult, expand: bool) -> List[HopRead]:
    hops = [HopRead.model_validate(h) for h in result.hops]
    if not expand or not hops:
        return hops
    display = svc.describe(result)
    for h in hops:
        a, b, m = display.people.get(h.person_a_id), display.people.get(h.person_b_id), display.movies.get(h.movie_id)
        h.person_a = PersonRef.model_validate(a) if a else None
        h.person_b = PersonRef.model_validate(b) if b else None
        h.movie = MovieRef.model_validate(m) if m else None
    return hops


@router.get("", response_model=PathSearchRead)
def find_path(
    source_id: int = Query(..., description="Person id to start from"),
    target_id: int = Query(..., description="Person id to reach"),
    max_degrees: Optional[int] = Query(None, ge=0, le=cfg.search.max_degrees_limit),
    expand: bool = Query(False, description="Embed person names and movie titles"),
    svc: PathSearchService = Depends(get_path_search),
) -> PathSearchRead:
    degrees_bound = cfg.search.default_max_degrees if max_degrees is None else max_degrees
    result = svc.find_path(source_id, target_id, degrees_bound)

    stats = SearchStatsRead.model_validate(result.stats) if result.stats else None
    if isinstance(result, PathError):
        if result.kind == PathErrorKind.not_found:
            return PathSearchRead(
                status="not_found",
                source_id=source_id,
                target_id=target_id,
                max_degrees=degrees_bound,
                message=result.message,
                stats=stats,
            )
        raise HTTPException(
            status_code=_ERROR_STATUS[result.kind],
            detail=PathErrorRead(kind=result.kind, message=result.message, retryable=result.retryable).model_dump(mode="json"),
        )

    return PathSearchRead(
        status="found",
        source_id=source_id,
        target_id=target_id,
        max_degrees=degrees_bound,
        degrees=result.degrees,
        hops=_hops(svc, result, expand),
        stats=stats,
    )
