# costar/services/schemas/paths.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from costar.domain.enums import PathErrorKind


class PersonRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MovieRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    release_year: Optional[int] = None


class HopRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    person_a_id: int
    movie_id: int
    person_b_id: int

    # populated only when the caller asks for display data
    person_a: Optional[PersonRef] = None
    movie: Optional[MovieRef] = None
    person_b: Optional[PersonRef] = None


class SearchStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    nodes_visited: int = 0
    layers_source: int = 0
    layers_target: int = 0
    batches: int = 0
    meeting_node: Optional[int] = None
    elapsed_sec: float = 0.0


class PathSearchRead(BaseModel):
    status: Literal["found", "not_found"]
    source_id: int
    target_id: int
    max_degrees: int
    degrees: Optional[int] = None
    hops: List[HopRead] = Field(default_factory=list)
    message: Optional[str] = None
    stats: Optional[SearchStatsRead] = None


class PathErrorRead(BaseModel):
    kind: PathErrorKind
    message: str
    retryable: bool


class CollaboratorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    neighbor_id: int
    connecting_movie_ids: List[int]
    weight: int
