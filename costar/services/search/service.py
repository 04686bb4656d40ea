# costar/services/search/service.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from sqlalchemy.orm import Session

from costar.common.settings import get_settings
from costar.database.models import Movie as DBMovie, Person as DBPerson
from costar.database.repos.collaboration_graph_repo import SqlAlchemyCollaborationGraph
from costar.database.repos.movie_repo import SqlAlchemyMovieRepo
from costar.database.repos.people_repo import SqlAlchemyPeopleRepo
from costar.domain.dataclasses.search import SearchBudget
from costar.domain.entities.path import PathError, PathResult
from costar.domain.policies.path_finder import PathFinder


@dataclass
class PathDisplay:
    """Display rows for the people and movies on a found path."""
    people: Dict[int, DBPerson] = field(default_factory=dict)
    movies: Dict[int, DBMovie] = field(default_factory=dict)


class PathSearchService:
    """Wires the SQLAlchemy adjacency reader into a PathFinder for one session."""

    def __init__(self, session: Session):
        self.session = session
        self.cfg = get_settings()
        self.graph = SqlAlchemyCollaborationGraph(session, include_crew_edges=self.cfg.search.include_crew_edges)
        self.finder = PathFinder(self.graph, config=self.cfg.search)

    def find_path(
        self,
        source_person_id: int,
        target_person_id: int,
        max_degrees: Optional[int] = None,
        budget: Optional[SearchBudget] = None,
        *,
        deadline: Optional[float] = None,
    ) -> Union[PathResult, PathError]:
        if max_degrees is not None and max_degrees > self.cfg.search.max_degrees_limit:
            max_degrees = self.cfg.search.max_degrees_limit
        return self.finder.find_path(
            source_person_id, target_person_id, max_degrees, budget, deadline=deadline
        )

    def describe(self, result: PathResult) -> PathDisplay:
        """Resolve names/titles for a result (ids stay authoritative)."""
        return PathDisplay(
            people=SqlAlchemyPeopleRepo(self.session).get_many(result.person_ids),
            movies=SqlAlchemyMovieRepo(self.session).get_many(result.movie_ids),
        )
