# costar/domain/ports/graph.py
from __future__ import annotations

from typing import Dict, Iterable, List, Protocol

from costar.domain.entities.neighbor import Neighbor


class GraphAccessorPort(Protocol):
    """
    Read-only view of the collaboration adjacency store.
    Implementations raise StorageUnavailableError when the store cannot be read.
    """

    def neighbors(self, person_id: int) -> List[Neighbor]: ...

    # Every requested id is a key of the result (empty list if isolated).
    def neighbors_batch(self, person_ids: Iterable[int]) -> Dict[int, List[Neighbor]]: ...

    def person_exists(self, person_id: int) -> bool: ...
