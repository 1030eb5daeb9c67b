from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from .shifts.service import ShiftService
from .shifts.sqlalchemy_shift_repository import SQLAlchemyShiftRepository
from .workers.service import WorkerService
from .workers.sqlalchemy_worker_repository import SQLAlchemyWorkerRepository


@dataclass(frozen=True)
class Container:
    workers_repo: SQLAlchemyWorkerRepository
    shifts_repo: SQLAlchemyShiftRepository

    worker_service: WorkerService
    shift_service: ShiftService


def build_container(*, session: Session) -> Container:
    """Wire repositories and services around one session.

    ``session`` is normally Flask-SQLAlchemy's request-scoped ``db.session``.
    """
    workers_repo = SQLAlchemyWorkerRepository(session)
    shifts_repo = SQLAlchemyShiftRepository(session)

    worker_service = WorkerService(workers_repo)
    shift_service = ShiftService(shifts_repo, workers_repo)

    return Container(
        workers_repo=workers_repo,
        shifts_repo=shifts_repo,
        worker_service=worker_service,
        shift_service=shift_service,
    )
