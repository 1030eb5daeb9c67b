from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..database.session import committing
from .model import Shift
from .repository import ShiftRepository


class SQLAlchemyShiftRepository(ShiftRepository):
    def __init__(self, session: Session):
        self._session = session

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self._session.get(Shift, shift_id, options=[joinedload(Shift.worker)])

    def list_all(self) -> Sequence[Shift]:
        stmt = select(Shift).options(joinedload(Shift.worker)).order_by(Shift.start_time, Shift.id)
        return self._session.execute(stmt).scalars().all()

    def list_by_worker(self, worker_id: int) -> Sequence[Shift]:
        stmt = (
            select(Shift)
            .options(joinedload(Shift.worker))
            .where(Shift.worker_id == worker_id)
            .order_by(Shift.start_time, Shift.id)
        )
        return self._session.execute(stmt).scalars().all()

    def add(self, shift: Shift) -> Shift:
        with committing(self._session) as session:
            session.add(shift)
        return shift

    def save(self, shift: Shift) -> Shift:
        with committing(self._session):
            pass
        return shift

    def delete(self, shift: Shift) -> None:
        with committing(self._session) as session:
            session.delete(shift)
