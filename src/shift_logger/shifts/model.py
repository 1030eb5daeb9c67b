from __future__ import annotations

from datetime import timedelta

from ..database.extensions import db


class Shift(db.Model):
    __tablename__ = "shifts"

    id = db.Column(db.Integer, primary_key=True)
    worker_id = db.Column(
        db.Integer,
        db.ForeignKey("workers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=False)

    worker = db.relationship("Worker", back_populates="shifts")

    @property
    def duration(self) -> timedelta:
        # Derived only; there is no duration column.
        return self.end_time - self.start_time

    def __repr__(self) -> str:
        return f"<Shift id={self.id} worker_id={self.worker_id} {self.start_time}..{self.end_time}>"
