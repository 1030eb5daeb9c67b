from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..shifts.model import Shift
from ..workers.model import Worker
from .extensions import db
from .session import committing

logger = logging.getLogger(__name__)

_DEMO_WORKERS = [
    ("Alice Nguyen", "Operations", "alice@example.com", "555-0101"),
    ("Bob Tran", "Operations", None, "555-0102"),
    ("Carla Pham", "Logistics", "carla@example.com", None),
    ("Duc Le", "Maintenance", None, None),
]


def create_schema() -> None:
    """Create missing tables. Must run inside an application context."""
    # Import side effect: both models must be mapped before create_all.
    from ..shifts import model as _shifts  # noqa: F401
    from ..workers import model as _workers  # noqa: F401

    db.create_all()
    logger.info("Schema ready (tables=%s)", sorted(db.metadata.tables))


def seed_demo_data(session: Session, *, days: int = 5) -> int:
    """Insert demo workers with one 8-hour shift per day each.

    Idempotent: does nothing when any worker already exists. Returns the
    number of workers inserted.
    """
    if session.execute(select(Worker.id).limit(1)).first() is not None:
        logger.info("Seed skipped: workers table is not empty")
        return 0

    start_day = datetime.now().replace(hour=8, minute=0, second=0, microsecond=0) - timedelta(days=days)
    with committing(session):
        for name, department, email, phone in _DEMO_WORKERS:
            worker = Worker(name=name, department=department, email=email, phone_number=phone)
            for offset in range(days):
                start = start_day + timedelta(days=offset)
                worker.shifts.append(Shift(start_time=start, end_time=start + timedelta(hours=8)))
            session.add(worker)

    logger.info("Seeded %s demo workers", len(_DEMO_WORKERS))
    return len(_DEMO_WORKERS)
