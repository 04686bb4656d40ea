# tests/domain/conftest.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

import pytest

from costar.domain.entities.neighbor import Neighbor
from costar.domain.errors import StorageUnavailableError


class FakeGraph:
    """
    In-memory GraphAccessorPort.
    edges: (person_x, person_y, [movie ids]); release_years orders movies per edge.
    Records every call so tests can assert how the finder used the store.
    """

    def __init__(
        self,
        edges: Iterable[Tuple[int, int, Sequence[int]]],
        *,
        people: Iterable[int] = (),
        release_years: Optional[Dict[int, Optional[int]]] = None,
        fail_batch: bool = False,
        fail_exists: bool = False,
    ) -> None:
        self.release_years = release_years or {}
        self.people: Set[int] = set(people)
        self.movies: Dict[frozenset, List[int]] = {}
        for x, y, movies in edges:
            assert x != y, "no self-edges"
            self.people.update((x, y))
            self.movies.setdefault(frozenset((x, y)), []).extend(movies)
        self.adj: Dict[int, Set[int]] = {p: set() for p in self.people}
        for pair in self.movies:
            x, y = tuple(pair)
            self.adj[x].add(y)
            self.adj[y].add(x)
        self.fail_batch = fail_batch
        self.fail_exists = fail_exists
        self.batch_calls: List[List[int]] = []
        self.exists_calls: List[int] = []

    def _ordered_movies(self, x: int, y: int) -> Tuple[int, ...]:
        movies = sorted(set(self.movies[frozenset((x, y))]))

        def key(mid: int):
            year = self.release_years.get(mid)
            return (year is None, year or 0, mid)

        return tuple(sorted(movies, key=key))

    def neighbors(self, person_id: int) -> List[Neighbor]:
        return self.neighbors_batch([person_id])[person_id]

    def neighbors_batch(self, person_ids) -> Dict[int, List[Neighbor]]:
        ids = list(person_ids)
        self.batch_calls.append(ids)
        if self.fail_batch:
            raise StorageUnavailableError("adjacency store unavailable: connection refused")
        out: Dict[int, List[Neighbor]] = {}
        for pid in ids:
            nbs = []
            for nid in self.adj.get(pid, ()):
                movies = self._ordered_movies(pid, nid)
                nbs.append(Neighbor(neighbor_id=nid, connecting_movie_ids=movies, weight=len(movies)))
            nbs.sort(key=lambda n: (-n.weight, n.neighbor_id))
            out[pid] = nbs
        return out

    def person_exists(self, person_id: int) -> bool:
        self.exists_calls.append(person_id)
        if self.fail_exists:
            raise StorageUnavailableError("adjacency store unavailable: connection refused")
        return person_id in self.people

    def edge_movies(self, x: int, y: int) -> Set[int]:
        return set(self.movies.get(frozenset((x, y)), ()))


class StepClock:
    """Monotonic fake: each call advances by `step` seconds."""

    def __init__(self, start: float = 100.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture()
def fake_graph():
    return FakeGraph


@pytest.fixture()
def step_clock():
    return StepClock
