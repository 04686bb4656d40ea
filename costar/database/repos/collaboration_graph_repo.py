# costar/database/repos/collaboration_graph_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import distinct, exists, func, select, union_all
from sqlalchemy.orm import Session

from costar.common.logging import get_logger
from costar.common.settings import get_settings
from costar.database.core.main import STORAGE_ERRORS
from costar.database.models import (
    Collaboration as DBCollaboration,
    CollaborationDetail as DBCollaborationDetail,
    Movie as DBMovie,
    Person as DBPerson,
)
from costar.domain.entities.neighbor import Neighbor
from costar.domain.enums import CollaborationType
from costar.domain.errors import StorageUnavailableError

log = get_logger(__name__)


class SqlAlchemyCollaborationGraph:
    """
    Read-only adjacency queries over `collaborations` / `collaboration_details`.
    Satisfies GraphAccessorPort via structural typing.

    Each canonical pair (a < b) is queried from both columns, each of which
    leads an index, so a lookup never scans the edge table.
    """

    def __init__(self, session: Session, *, include_crew_edges: Optional[bool] = None) -> None:
        self.session = session
        if include_crew_edges is None:
            include_crew_edges = get_settings().search.include_crew_edges
        self.collaboration_types = CollaborationType.qualifying(include_crew_edges)

    # -------- GraphAccessorPort --------

    def neighbors(self, person_id: int, limit: Optional[int] = None) -> List[Neighbor]:
        """
        Collaborators of one person, heaviest first. With `limit`, only the top
        `limit` neighbor ids are picked in SQL and just their movies are loaded.
        """
        if limit is None:
            return self.neighbors_batch([person_id])[person_id]
        if limit < 1:
            return []

        u = self._adjacency_union([person_id])
        top_stmt = (
            select(u.c.neighbor_id)
            .group_by(u.c.neighbor_id)
            .order_by(func.count(distinct(u.c.movie_id)).desc(), u.c.neighbor_id)
            .limit(limit)
        )
        top = [nid for (nid,) in self._execute(top_stmt, f"top neighbors of {person_id}")]
        if not top:
            return []
        return self._group(self._adjacency_stmt([person_id], top), [person_id])[person_id]

    def neighbors_batch(self, person_ids: Iterable[int]) -> Dict[int, List[Neighbor]]:
        ids = list(dict.fromkeys(person_ids))
        if not ids:
            return {}
        return self._group(self._adjacency_stmt(ids), ids)

    def person_exists(self, person_id: int) -> bool:
        stmt = select(exists().where(DBPerson.id == person_id))
        return bool(self._execute(stmt, f"person {person_id}")[0][0])

    # -------- helpers --------

    def _execute(self, stmt, what: str):
        try:
            return self.session.execute(stmt).all()
        except STORAGE_ERRORS as e:
            log.warning("lookup failed for %s: %s", what, e)
            raise StorageUnavailableError(f"adjacency store unavailable: {e}") from e

    def _group(self, stmt, ids: List[int]) -> Dict[int, List[Neighbor]]:
        out: Dict[int, List[Neighbor]] = {pid: [] for pid in ids}
        rows = self._execute(stmt, f"neighbors of {len(ids)} people")

        # person_id -> neighbor_id -> movie ids (earliest release first)
        grouped: Dict[int, Dict[int, List[int]]] = {}
        for person_id, neighbor_id, movie_id in rows:
            movies = grouped.setdefault(person_id, {}).setdefault(neighbor_id, [])
            if movie_id not in movies:
                movies.append(movie_id)

        for person_id, by_neighbor in grouped.items():
            nbs = [
                Neighbor(neighbor_id=nid, connecting_movie_ids=tuple(movies), weight=len(movies))
                for nid, movies in by_neighbor.items()
            ]
            nbs.sort(key=lambda n: (-n.weight, n.neighbor_id))
            out[person_id] = nbs
        return out

    def _adjacency_union(self, ids: List[int], neighbor_ids: Optional[List[int]] = None):
        c, d, m = DBCollaboration, DBCollaborationDetail, DBMovie

        def _side(own, other):
            stmt = (
                select(
                    own.label("person_id"),
                    other.label("neighbor_id"),
                    d.movie_id.label("movie_id"),
                    m.release_date.label("release_date"),
                )
                .select_from(c)
                .join(d, d.collaboration_id == c.id)
                .join(m, m.id == d.movie_id)
                .where(own.in_(ids), d.collaboration_type.in_(self.collaboration_types))
            )
            if neighbor_ids is not None:
                stmt = stmt.where(other.in_(neighbor_ids))
            return stmt

        return union_all(
            _side(c.person_a_id, c.person_b_id),
            _side(c.person_b_id, c.person_a_id),
        ).subquery()

    def _adjacency_stmt(self, ids: List[int], neighbor_ids: Optional[List[int]] = None):
        u = self._adjacency_union(ids, neighbor_ids)
        return (
            select(u.c.person_id, u.c.neighbor_id, u.c.movie_id)
            .order_by(
                u.c.person_id,
                u.c.neighbor_id,
                u.c.release_date.asc().nullslast(),
                u.c.movie_id,
            )
        )
