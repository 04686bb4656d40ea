# costar/domain/policies/path_reconstructor.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from costar.domain.entities.path import Hop
from costar.domain.errors import PathInvariantError

# person_id -> (parent_id, movie_id); search roots map to None
VisitedMap = Dict[int, Optional[Tuple[int, int]]]


def _walk_to_root(start: int, visited: VisitedMap, root: int) -> List[Tuple[int, int, int]]:
    """Follow back-pointers from `start`; returns (node, movie_id, parent) triples."""
    links: List[Tuple[int, int, int]] = []
    node = start
    while True:
        if node not in visited:
            raise PathInvariantError(f"person {node} is referenced but was never visited")
        link = visited[node]
        if link is None:
            break
        parent, movie_id = link
        links.append((node, movie_id, parent))
        node = parent
        if len(links) > len(visited):
            raise PathInvariantError(f"back-pointer cycle while walking from {start}")
    if node != root:
        raise PathInvariantError(f"walk from {start} ended at {node}, expected root {root}")
    return links


def reconstruct_path(
    meeting: int,
    visited_from_source: VisitedMap,
    visited_from_target: VisitedMap,
    source: int,
    target: int,
) -> Tuple[Hop, ...]:
    """
    Join both search trees at `meeting` into source -> target hops.

    The source side is walked meeting -> source and reversed; the target side
    is walked meeting -> target and kept in order.
    """
    head = [
        Hop(person_a_id=parent, movie_id=movie_id, person_b_id=node)
        for node, movie_id, parent in reversed(_walk_to_root(meeting, visited_from_source, source))
    ]
    tail = [
        Hop(person_a_id=node, movie_id=movie_id, person_b_id=parent)
        for node, movie_id, parent in _walk_to_root(meeting, visited_from_target, target)
    ]
    return tuple(head + tail)
