# costar/domain/dataclasses/reports.py
from __future__ import annotations

import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Base report (shared timing + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at (monotonic seconds)
    - helpers: start(), stop(), elapsed_sec, as_dict()
    """
    started_at: Optional[float] = None
    finished_at: Optional[float] = None

    def start(self, now: Optional[float] = None) -> None:
        if self.started_at is None:
            self.started_at = time.monotonic() if now is None else now

    def stop(self, now: Optional[float] = None) -> None:
        self.finished_at = time.monotonic() if now is None else now

    @property
    def elapsed_sec(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else time.monotonic()
        return max(0.0, end - self.started_at)

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["elapsed_sec"] = self.elapsed_sec
        return d


# ---------------------------------------------------------------------------
# Path search report
# ---------------------------------------------------------------------------
@dataclass
class SearchReport(BaseReport):
    nodes_visited: int = 0        # entries across both visited maps
    layers_source: int = 0        # layers expanded from the source side
    layers_target: int = 0        # layers expanded from the target side
    batches: int = 0              # neighbors_batch round-trips
    meeting_node: Optional[int] = None
