from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import pytest

from shift_logger.shifts.dto import CreateShiftRequest, UpdateShiftRequest
from shift_logger.shifts.model import Shift
from shift_logger.shifts.service import ShiftService
from shift_logger.workers.model import Worker


class InMemoryWorkers:
    def __init__(self, *workers: Worker):
        self.workers = {w.id: w for w in workers}

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        return self.workers.get(worker_id)


class InMemoryShifts:
    def __init__(self):
        self._next_id = 1
        self.shifts: dict[int, Shift] = {}

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.shifts.get(shift_id)

    def list_all(self):
        return sorted(self.shifts.values(), key=lambda s: (s.start_time, s.id))

    def list_by_worker(self, worker_id: int):
        return [s for s in self.list_all() if s.worker_id == worker_id]

    def add(self, shift: Shift) -> Shift:
        shift.id = self._next_id
        self._next_id += 1
        self.shifts[shift.id] = shift
        return shift

    def save(self, shift: Shift) -> Shift:
        return shift

    def delete(self, shift: Shift) -> None:
        del self.shifts[shift.id]


START = datetime(2024, 1, 2, 8, 0)
END = datetime(2024, 1, 2, 16, 30)


@pytest.fixture
def alice():
    return Worker(id=1, name="Alice", department="Ops")


@pytest.fixture
def bob():
    return Worker(id=2, name="Bob", department="Logistics")


@pytest.fixture
def shifts():
    return InMemoryShifts()


@pytest.fixture
def service(shifts, alice, bob):
    return ShiftService(shifts, InMemoryWorkers(alice, bob))


def test_create_shift_joins_worker_and_computes_duration(service):
    result = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END))

    assert result.is_success
    shift = result.value
    assert shift.id == 1
    assert shift.worker_name == "Alice"
    assert shift.worker_department == "Ops"
    assert shift.duration == timedelta(hours=8, minutes=30)
    assert shift.to_dict()["duration"] == "8:30:00"


def test_create_shift_rejects_end_not_after_start(service, shifts):
    same = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=START))
    before = service.create_shift(CreateShiftRequest(worker_id=1, start_time=END, end_time=START))

    assert same.error == "Start time must come before end time"
    assert before.error == "Start time must come before end time"
    assert shifts.shifts == {}


def test_create_shift_for_unknown_worker_names_the_id(service, shifts):
    result = service.create_shift(CreateShiftRequest(worker_id=99, start_time=START, end_time=END))

    assert result.error == "There is no worker in the database with id = 99"
    assert shifts.shifts == {}


def test_update_shift_can_move_to_another_worker(service):
    created = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END)).value

    result = service.update_shift(
        created.id, UpdateShiftRequest(worker_id=2, start_time=START, end_time=START + timedelta(hours=4))
    )

    assert result.is_success
    assert result.value.worker_name == "Bob"
    assert result.value.duration == timedelta(hours=4)


def test_update_missing_shift(service):
    result = service.update_shift(5, UpdateShiftRequest(worker_id=1, start_time=START, end_time=END))

    assert result.error == "There is no shift with id = 5 available in the database, nothing updated"


def test_update_rejects_invalid_id_and_times(service):
    assert service.update_shift(0, UpdateShiftRequest(worker_id=1, start_time=START, end_time=END)).is_failure
    assert (
        service.update_shift(1, UpdateShiftRequest(worker_id=1, start_time=END, end_time=START)).error
        == "Start time must come before end time"
    )


def test_delete_and_get_missing_shift(service):
    created = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END)).value

    assert service.delete_shift(created.id).is_success
    assert service.delete_shift(created.id).error == f"Shift with id = {created.id} is not in the database, nothing deleted"
    assert service.get_shift_by_id(created.id).error == f"Shift with id = {created.id} was not found in the database"


def test_lists_are_ordered_by_start_time(service):
    later = START + timedelta(days=1)
    service.create_shift(CreateShiftRequest(worker_id=1, start_time=later, end_time=later + timedelta(hours=8)))
    service.create_shift(CreateShiftRequest(worker_id=2, start_time=START, end_time=END))
    service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END))

    everything = service.get_all_shifts().value
    alices = service.get_shifts_by_worker_id(1).value

    assert [s.start_time for s in everything] == [START, START, later]
    assert [s.worker_id for s in alices] == [1, 1]
    assert service.get_shifts_by_worker_id(3).value == []


def test_shifts_by_worker_rejects_invalid_id(service):
    result = service.get_shifts_by_worker_id(0)

    assert result.is_failure
    assert "must be greater than 0" in result.error


def test_update_shift_to_unknown_worker_fails_and_keeps_shift(service, shifts):
    created = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END)).value

    result = service.update_shift(created.id, UpdateShiftRequest(worker_id=42, start_time=START, end_time=END))

    assert result.error == "There is no worker in the database with id = 42"
    assert shifts.shifts[created.id].worker_id == 1
    assert service.get_shift_by_id(created.id).value.worker_name == "Alice"


def test_update_with_end_not_after_start_leaves_shift_unchanged(service, shifts):
    created = service.create_shift(CreateShiftRequest(worker_id=1, start_time=START, end_time=END)).value

    result = service.update_shift(created.id, UpdateShiftRequest(worker_id=2, start_time=END, end_time=END))

    assert result.error == "Start time must come before end time"
    stored = shifts.shifts[created.id]
    assert (stored.worker_id, stored.start_time, stored.end_time) == (1, START, END)


def test_get_after_create_returns_same_shift(service):
    created = service.create_shift(CreateShiftRequest(worker_id=2, start_time=START, end_time=END)).value

    fetched = service.get_shift_by_id(created.id).value

    assert fetched == created
    assert fetched.id >= 1
    assert (fetched.worker_id, fetched.start_time, fetched.end_time) == (2, START, END)
    assert fetched.duration == END - START
