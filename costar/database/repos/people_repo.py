from __future__ import annotations
from typing import Dict, Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from costar.database.models.person import Person as DBPerson


class SqlAlchemyPeopleRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get_many(self, person_ids: Iterable[int]) -> Dict[int, DBPerson]:
        ids = list(set(person_ids))
        if not ids:
            return {}
        rows = self.db.execute(select(DBPerson).where(DBPerson.id.in_(ids))).scalars().all()
        return {p.id: p for p in rows}
