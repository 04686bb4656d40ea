from costar.services.schemas.paths import (
    PersonRef,
    MovieRef,
    HopRead,
    SearchStatsRead,
    PathSearchRead,
    PathErrorRead,
    CollaboratorRead,
)
__all__ = [
    "PersonRef",
    "MovieRef",
    "HopRead",
    "SearchStatsRead",
    "PathSearchRead",
    "PathErrorRead",
    "CollaboratorRead",
]
