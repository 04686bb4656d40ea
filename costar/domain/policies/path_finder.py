# costar/domain/policies/path_finder.py
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from costar.common.iter import chunked
from costar.common.logging import get_logger
from costar.common.settings import SearchConfig, get_settings
from costar.domain.dataclasses.reports import SearchReport
from costar.domain.dataclasses.search import SearchBudget
from costar.domain.entities.path import PathError, PathResult
from costar.domain.enums.path_error_kind import PathErrorKind
from costar.domain.errors import StorageUnavailableError
from costar.domain.policies.path_reconstructor import VisitedMap, reconstruct_path
from costar.domain.ports.graph import GraphAccessorPort

log = get_logger(__name__)

# Nodes inserted between wall-clock checks while a single batch is consumed.
_CLOCK_CHECK_EVERY = 1024


class _BudgetExceeded(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass
class _Side:
    name: str
    root: int
    visited: VisitedMap = field(default_factory=dict)
    frontier: List[int] = field(default_factory=list)
    depth: int = 0

    def __post_init__(self) -> None:
        self.visited[self.root] = None
        self.frontier.append(self.root)


class PathFinder:
    """
    Bidirectional breadth-first search over the collaboration graph.

    Each step grows whichever side currently has the smaller frontier by one
    full layer (ties go to the source side), fetching adjacency for the whole
    layer through `neighbors_batch`. Newly discovered people are checked
    against the opposite side as they are inserted, so the search stops at the
    first meeting node instead of finishing a hub-sized layer.

    The finder keeps no state between calls; concurrent searches may share one
    instance as long as the accessor allows it.
    """

    def __init__(
        self,
        graph: GraphAccessorPort,
        *,
        config: Optional[SearchConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.graph = graph
        self.cfg = config or get_settings().search
        self.clock = clock

    # ---------------- public ----------------

    def find_path(
        self,
        source_person_id: int,
        target_person_id: int,
        max_degrees: Optional[int] = None,
        budget: Optional[SearchBudget] = None,
        *,
        deadline: Optional[float] = None,
    ) -> Union[PathResult, PathError]:
        """
        Shortest chain of co-appearances from source to target.

        `deadline` is an absolute value of the finder's clock
        (`time.monotonic()` by default); the search stops at whichever comes
        first, the deadline or the budget's time allowance.
        """
        if max_degrees is None:
            max_degrees = self.cfg.default_max_degrees
        budget = budget or SearchBudget.from_config(self.cfg)

        report = SearchReport()
        report.start(self.clock())
        limit_at = report.started_at + budget.time_budget_sec
        if deadline is not None:
            limit_at = min(limit_at, deadline)

        if max_degrees < 0:
            return self._fail(report, PathErrorKind.invalid_input, f"max_degrees must be >= 0, got {max_degrees}")

        try:
            missing = [
                pid for pid in dict.fromkeys((source_person_id, target_person_id))
                if not self.graph.person_exists(pid)
            ]
        except StorageUnavailableError as e:
            return self._fail(report, PathErrorKind.storage_unavailable, str(e))
        if missing:
            return self._fail(
                report,
                PathErrorKind.invalid_input,
                "unknown person id(s): " + ", ".join(str(m) for m in missing),
            )

        if source_person_id == target_person_id:
            report.stop(self.clock())
            return PathResult(degrees=0, hops=(), stats=report)

        src = _Side("source", source_person_id)
        tgt = _Side("target", target_person_id)
        report.nodes_visited = 2

        try:
            while True:
                if src.depth + tgt.depth >= max_degrees:
                    return self._fail(
                        report, PathErrorKind.not_found, f"no path within {max_degrees} degrees"
                    )

                side, other = (src, tgt) if len(src.frontier) <= len(tgt.frontier) else (tgt, src)
                if not side.frontier:
                    return self._fail(
                        report,
                        PathErrorKind.not_found,
                        f"{side.name} side exhausted after {side.depth} degrees",
                    )

                meeting = self._expand(side, other, report, budget, limit_at)
                if meeting is not None:
                    break
        except _BudgetExceeded as e:
            return self._fail(report, PathErrorKind.timeout, e.reason)
        except StorageUnavailableError as e:
            return self._fail(report, PathErrorKind.storage_unavailable, str(e))

        hops = reconstruct_path(meeting, src.visited, tgt.visited, source_person_id, target_person_id)
        report.meeting_node = meeting
        report.stop(self.clock())
        log.info(
            "path %s -> %s: %d degrees via %s (visited=%d batches=%d %.3fs)",
            source_person_id, target_person_id, len(hops), meeting,
            report.nodes_visited, report.batches, report.elapsed_sec,
        )
        return PathResult(degrees=len(hops), hops=hops, stats=report)

    # ---------------- helpers ----------------

    def _check_clock(self, limit_at: float) -> None:
        if self.clock() >= limit_at:
            raise _BudgetExceeded("time budget exceeded")

    def _expand(
        self,
        side: _Side,
        other: _Side,
        report: SearchReport,
        budget: SearchBudget,
        limit_at: float,
    ) -> Optional[int]:
        """Grow `side` by one layer. Returns the meeting node as soon as one is seen."""
        log.debug("expand %s layer %d: frontier=%d", side.name, side.depth + 1, len(side.frontier))
        next_frontier: List[int] = []
        side.depth += 1
        if side.name == "source":
            report.layers_source += 1
        else:
            report.layers_target += 1

        inserted = 0
        for chunk in chunked(side.frontier, self.cfg.batch_size):
            self._check_clock(limit_at)
            adjacency = self.graph.neighbors_batch(chunk)
            report.batches += 1
            self._check_clock(limit_at)

            for pid in chunk:
                for nb in adjacency.get(pid, ()):
                    nid = nb.neighbor_id
                    if nid in side.visited:
                        continue
                    side.visited[nid] = (pid, nb.representative_movie_id)
                    report.nodes_visited += 1
                    if nid in other.visited:
                        side.frontier = next_frontier
                        return nid
                    if report.nodes_visited > budget.max_nodes:
                        raise _BudgetExceeded(f"visited-node budget of {budget.max_nodes} exceeded")
                    next_frontier.append(nid)
                    inserted += 1
                    if inserted % _CLOCK_CHECK_EVERY == 0:
                        self._check_clock(limit_at)

        side.frontier = next_frontier
        return None

    def _fail(self, report: SearchReport, kind: PathErrorKind, message: str) -> PathError:
        report.stop(self.clock())
        if kind in (PathErrorKind.timeout, PathErrorKind.storage_unavailable):
            log.warning("path search %s: %s (visited=%d)", kind.value, message, report.nodes_visited)
        else:
            log.info("path search %s: %s", kind.value, message)
        return PathError(kind=kind, message=message, stats=report)
