from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from ..common.validators import is_valid_end_time, is_valid_numeric_input
from ..core.result import Result, ValueResult, log_and_fail
from ..workers.repository import WorkerRepository
from .dto import CreateShiftRequest, ShiftResponse, UpdateShiftRequest
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)

_START_BEFORE_END = "Start time must come before end time"


def _invalid_shift_id(shift_id: int) -> str:
    return f"Shift id = {shift_id} is invalid, shift ids must be greater than 0"


def _invalid_worker_id(worker_id: int) -> str:
    return f"Worker id = {worker_id} is invalid, worker ids must be greater than 0"


def _unknown_worker(worker_id: int) -> str:
    return f"There is no worker in the database with id = {worker_id}"


class ShiftService:
    """Use case: log and manage shifts.

    A shift must reference an existing worker; the worker repository is
    injected so the check happens against the same store before any write.
    Responses carry the worker's current name and department, joined when
    the response is built.
    """

    def __init__(self, shifts: ShiftRepository, workers: WorkerRepository):
        self._shifts = shifts
        self._workers = workers

    def create_shift(self, request: CreateShiftRequest) -> ValueResult[ShiftResponse]:
        if request is None:
            return log_and_fail(logger, "Shift request cannot be null")
        if not is_valid_numeric_input(request.worker_id):
            return log_and_fail(logger, _invalid_worker_id(request.worker_id))
        if not is_valid_end_time(request.start_time, request.end_time):
            return log_and_fail(logger, _START_BEFORE_END)

        try:
            worker = self._workers.get_by_id(request.worker_id)
            if worker is None:
                return log_and_fail(logger, _unknown_worker(request.worker_id))

            shift = self._shifts.add(
                Shift(
                    worker_id=worker.id,
                    worker=worker,
                    start_time=request.start_time,
                    end_time=request.end_time,
                )
            )
            logger.info("Created shift id=%s for worker id=%s", shift.id, worker.id)
            return ValueResult.ok(ShiftResponse.from_model(shift, worker))
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e)

    def update_shift(self, shift_id: int, request: UpdateShiftRequest) -> ValueResult[ShiftResponse]:
        if not is_valid_numeric_input(shift_id):
            return log_and_fail(logger, _invalid_shift_id(shift_id))
        if request is None:
            return log_and_fail(logger, "Shift request cannot be null")
        if not is_valid_numeric_input(request.worker_id):
            return log_and_fail(logger, _invalid_worker_id(request.worker_id))
        if not is_valid_end_time(request.start_time, request.end_time):
            return log_and_fail(logger, _START_BEFORE_END)

        try:
            shift = self._shifts.get_by_id(shift_id)
            if shift is None:
                return log_and_fail(
                    logger, f"There is no shift with id = {shift_id} available in the database, nothing updated"
                )

            worker = self._workers.get_by_id(request.worker_id)
            if worker is None:
                return log_and_fail(logger, _unknown_worker(request.worker_id))

            shift.worker_id = worker.id
            shift.worker = worker
            shift.start_time = request.start_time
            shift.end_time = request.end_time

            shift = self._shifts.save(shift)
            logger.info("Updated shift id=%s", shift_id)
            return ValueResult.ok(ShiftResponse.from_model(shift, worker))
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e)

    def delete_shift(self, shift_id: int) -> Result:
        if not is_valid_numeric_input(shift_id):
            return log_and_fail(logger, _invalid_shift_id(shift_id), result_type=Result)

        try:
            shift = self._shifts.get_by_id(shift_id)
            if shift is None:
                return log_and_fail(
                    logger, f"Shift with id = {shift_id} is not in the database, nothing deleted", result_type=Result
                )

            self._shifts.delete(shift)
            logger.info("Deleted shift id=%s", shift_id)
            return Result.ok()
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e, result_type=Result)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e, result_type=Result)

    def get_shift_by_id(self, shift_id: int) -> ValueResult[ShiftResponse]:
        if not is_valid_numeric_input(shift_id):
            return log_and_fail(logger, _invalid_shift_id(shift_id))

        try:
            shift = self._shifts.get_by_id(shift_id)
            if shift is None:
                return log_and_fail(logger, f"Shift with id = {shift_id} was not found in the database")

            worker = self._workers.get_by_id(shift.worker_id)
            if worker is None:
                return log_and_fail(logger, _unknown_worker(shift.worker_id))

            return ValueResult.ok(ShiftResponse.from_model(shift, worker))
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred loading shifts: {e}", e)

    def get_all_shifts(self) -> ValueResult[List[ShiftResponse]]:
        try:
            shifts = self._shifts.list_all()
            return ValueResult.ok([ShiftResponse.from_model(s, s.worker) for s in shifts])
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred loading shifts: {e}", e)

    def get_shifts_by_worker_id(self, worker_id: int) -> ValueResult[List[ShiftResponse]]:
        if not is_valid_numeric_input(worker_id):
            return log_and_fail(logger, _invalid_worker_id(worker_id))

        try:
            shifts = self._shifts.list_by_worker(worker_id)
            return ValueResult.ok([ShiftResponse.from_model(s, s.worker) for s in shifts])
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred loading shifts: {e}", e)
