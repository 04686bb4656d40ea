# costar/domain/dataclasses/search.py
from __future__ import annotations

from dataclasses import dataclass

from costar.common.settings import SearchConfig


@dataclass(frozen=True)
class SearchBudget:
    """Resource ceiling for one search; exceeding either field ends it with a timeout."""
    max_nodes: int
    time_budget_sec: float

    def __post_init__(self) -> None:
        if self.max_nodes < 1:
            raise ValueError("max_nodes must be >= 1")
        if self.time_budget_sec <= 0:
            raise ValueError("time_budget_sec must be > 0")

    @classmethod
    def from_config(cls, cfg: SearchConfig) -> "SearchBudget":
        return cls(max_nodes=cfg.max_nodes_visited, time_budget_sec=cfg.time_budget_sec)
