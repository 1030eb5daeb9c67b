from __future__ import annotations

from ..database.extensions import db


class Worker(db.Model):
    """Domain entity: a person who works shifts.

    Deleting a worker deletes its shifts (ORM cascade plus ON DELETE CASCADE
    on the foreign key).
    """

    __tablename__ = "workers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    department = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    phone_number = db.Column(db.String(32), nullable=True)

    shifts = db.relationship(
        "Shift",
        back_populates="worker",
        cascade="all, delete-orphan",
        order_by="Shift.start_time",
    )

    def __repr__(self) -> str:
        return f"<Worker id={self.id} name={self.name!r}>"
