# costar/database/models/__init__.py

from costar.database.core.main import Base
from costar.database.models.person import Person
from costar.database.models.movie import Movie, Credit
from costar.database.models.collaboration import Collaboration, CollaborationDetail

__all__ = [
    "Base",
    "Person",
    "Movie",
    "Credit",
    "Collaboration",
    "CollaborationDetail",
]
