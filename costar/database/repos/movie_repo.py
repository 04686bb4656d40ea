from __future__ import annotations
from typing import Dict, Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from costar.database.models.movie import Movie as DBMovie


class SqlAlchemyMovieRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get_many(self, movie_ids: Iterable[int]) -> Dict[int, DBMovie]:
        ids = list(set(movie_ids))
        if not ids:
            return {}
        rows = self.db.execute(select(DBMovie).where(DBMovie.id.in_(ids))).scalars().all()
        return {m.id: m for m in rows}
