# costar/domain/entities/path.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from costar.domain.dataclasses.reports import SearchReport
from costar.domain.enums.path_error_kind import PathErrorKind


@dataclass(frozen=True)
class Hop:
    """One traversal: `person_a_id` and `person_b_id` both appear in `movie_id`."""
    person_a_id: int
    movie_id: int
    person_b_id: int


@dataclass(frozen=True)
class PathResult:
    """Ordered source -> target hops. `degrees == len(hops)`."""
    degrees: int
    hops: Tuple[Hop, ...] = ()
    stats: Optional[SearchReport] = field(default=None, compare=False)

    @property
    def person_ids(self) -> Tuple[int, ...]:
        if not self.hops:
            return ()
        return (self.hops[0].person_a_id,) + tuple(h.person_b_id for h in self.hops)

    @property
    def movie_ids(self) -> Tuple[int, ...]:
        return tuple(h.movie_id for h in self.hops)


@dataclass(frozen=True)
class PathError:
    """
    Non-success outcome of a search. These are returned, never raised:
    callers branch on `kind`.
    """
    kind: PathErrorKind
    message: str = ""
    stats: Optional[SearchReport] = field(default=None, compare=False)

    @property
    def retryable(self) -> bool:
        return self.kind in (PathErrorKind.timeout, PathErrorKind.storage_unavailable)
