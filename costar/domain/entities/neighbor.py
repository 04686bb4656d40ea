# costar/domain/entities/neighbor.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Neighbor:
    """
    One direct collaborator of a person, as read from the adjacency store.
    `connecting_movie_ids` holds every qualifying shared movie, earliest
    release first (undated movies last, then by id); `weight` is their count.
    """
    neighbor_id: int
    connecting_movie_ids: Tuple[int, ...]
    weight: int

    def __post_init__(self) -> None:
        if not self.connecting_movie_ids:
            raise ValueError(f"neighbor {self.neighbor_id} has no connecting movies")

    @property
    def representative_movie_id(self) -> int:
        """Movie shown for this hop: the earliest-released shared movie."""
        return self.connecting_movie_ids[0]
