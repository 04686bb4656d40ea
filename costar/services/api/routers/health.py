# costar/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from costar.common.settings import get_settings

router = APIRouter()

@router.get("/healthz")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "search": {
            "default_max_degrees": s.search.default_max_degrees,
            "max_degrees_limit": s.search.max_degrees_limit,
            "include_crew_edges": s.search.include_crew_edges,
        },
    }
