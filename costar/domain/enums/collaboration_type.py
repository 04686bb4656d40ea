from __future__ import annotations
from enum import StrEnum


class CollaborationType(StrEnum):
    """Which credit classes the two people of a shared movie held."""
    cast_cast = "cast-cast"
    cast_crew = "cast-crew"
    crew_crew = "crew-crew"

    @classmethod
    def qualifying(cls, include_crew: bool) -> tuple["CollaborationType", ...]:
        if include_crew:
            return tuple(cls)
        return (cls.cast_cast,)
