from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


@contextmanager
def committing(session: Session) -> Iterator[Session]:
    """Commit on exit; roll back and re-raise if the store rejects the change."""
    try:
        yield session
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
