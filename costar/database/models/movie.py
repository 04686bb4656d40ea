# costar/database/models/movie.py
from __future__ import annotations

from datetime import date
from typing import Optional, List

from sqlalchemy import (
    BigInteger, Date, Enum as SAEnum, ForeignKey, Integer, String, Text, UniqueConstraint, Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from costar.database.core.main import Base
from costar.database.core.service_object import ServiceObject
from costar.database.models.person import Person
from costar.domain.enums import CreditType


class Movie(ServiceObject, Base):
    __tablename__ = "movies"
    __table_args__ = (
        Index("ix_movies_release_date", "release_date"),
        Index("ix_movies_tmdb_id", "tmdb_id", unique=True),
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    release_date: Mapped[Optional[date]] = mapped_column(Date)
    tmdb_id: Mapped[Optional[int]] = mapped_column(BigInteger)

    credits: Mapped[List["Credit"]] = relationship(
        back_populates="movie", cascade="all,delete-orphan", passive_deletes=True
    )

    @property
    def release_year(self) -> Optional[int]:
        return self.release_date.year if self.release_date else None

    def __repr__(self) -> str:
        return f"<Movie id={self.id} title={self.title!r}>"


class Credit(ServiceObject, Base):
    """
    One person's credit on one movie. A (movie, person) pair appears at most
    once per credit type.
    """
    __tablename__ = "movie_credits"
    __table_args__ = (
        UniqueConstraint("movie_id", "person_id", "credit_type", name="uq_movie_credits_movie_person_type"),
        Index("ix_movie_credits_person_id", "person_id"),
        Index("ix_movie_credits_movie_id", "movie_id"),
    )

    movie_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False
    )
    person_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    )
    credit_type: Mapped[CreditType] = mapped_column(SAEnum(CreditType, name="credit_type"), nullable=False)

    character: Mapped[Optional[str]] = mapped_column(Text)
    cast_order: Mapped[Optional[int]] = mapped_column(Integer)
    department: Mapped[Optional[str]] = mapped_column(String(64))
    job: Mapped[Optional[str]] = mapped_column(String(128))

    movie: Mapped[Movie] = relationship(back_populates="credits")
    person: Mapped[Person] = relationship(back_populates="credits")
