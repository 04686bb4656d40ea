# costar/database/models/collaboration.py
from __future__ import annotations

from datetime import date
from typing import Optional, List

from sqlalchemy import (
    BigInteger, CheckConstraint, Date, Enum as SAEnum, ForeignKey, Integer, UniqueConstraint, Index, text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from costar.database.core.main import Base
from costar.database.core.service_object import ServiceObject
from costar.domain.enums import CollaborationType


class Collaboration(ServiceObject, Base):
    """
    Materialized adjacency row for an unordered pair of people.
    Written by the aggregation job; the search only reads it.
    The pair is stored canonically (person_a_id < person_b_id) and both
    columns lead an index so lookups from either side avoid a scan.
    """
    __tablename__ = "collaborations"
    __table_args__ = (
        CheckConstraint("person_a_id < person_b_id", name="ordered_persons"),
        UniqueConstraint("person_a_id", "person_b_id", name="uq_collaborations_pair"),
        Index("ix_collaborations_person_b_person_a", "person_b_id", "person_a_id"),
        Index("ix_collaborations_collaboration_count", "collaboration_count"),
    )

    person_a_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    )
    person_b_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("people.id", ondelete="CASCADE"), nullable=False
    )
    collaboration_count: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    first_collaboration_date: Mapped[Optional[date]] = mapped_column(Date)
    latest_collaboration_date: Mapped[Optional[date]] = mapped_column(Date)

    details: Mapped[List["CollaborationDetail"]] = relationship(
        back_populates="collaboration", cascade="all,delete-orphan", passive_deletes=True
    )

    @staticmethod
    def ordered_pair(x: int, y: int) -> tuple[int, int]:
        if x == y:
            raise ValueError("a person cannot collaborate with themselves")
        return (x, y) if x < y else (y, x)


class CollaborationDetail(Base):
    """One shared movie behind a collaboration, tagged by the credit classes involved."""
    __tablename__ = "collaboration_details"
    __table_args__ = (
        UniqueConstraint("collaboration_id", "movie_id", "collaboration_type",
                         name="uq_collaboration_details_collab_movie_type"),
        Index("ix_collaboration_details_collaboration_id", "collaboration_id"),
        Index("ix_collaboration_details_movie_id", "movie_id"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    collaboration_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("collaborations.id", ondelete="CASCADE"), nullable=False
    )
    movie_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False
    )
    collaboration_type: Mapped[CollaborationType] = mapped_column(
        SAEnum(CollaborationType, name="collaboration_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    year: Mapped[Optional[int]] = mapped_column(Integer)

    collaboration: Mapped[Collaboration] = relationship(back_populates="details")
