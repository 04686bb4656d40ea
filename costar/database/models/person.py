# costar/database/models/person.py
from __future__ import annotations

from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import BigInteger, String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from costar.database.core.main import Base
from costar.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .movie import Credit


class Person(ServiceObject, Base):
    """
    A credited person. Display attributes only; the search uses the id.
    """
    __tablename__ = "people"
    __table_args__ = (
        Index("ix_people_tmdb_id", "tmdb_id", unique=True),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tmdb_id: Mapped[Optional[int]] = mapped_column(BigInteger)
    known_for_department: Mapped[Optional[str]] = mapped_column(String(64))

    credits: Mapped[List["Credit"]] = relationship(back_populates="person", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.name!r}>"
