from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from ..common.validators import is_valid_input_string, is_valid_numeric_input
from ..core.result import Result, ValueResult, log_and_fail
from .dto import CreateWorkerRequest, UpdateWorkerRequest, WorkerResponse
from .model import Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


def _invalid_id(worker_id: int) -> str:
    return f"Id = {worker_id} is an invalid id. Ids must be greater than 0"


def _clean(value):
    return value.strip() if is_valid_input_string(value) else None


class WorkerService:
    """Use case: manage workers.

    Every method returns a result instead of raising; store errors are
    logged here and turned into failure messages.
    """

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def create_worker(self, request: CreateWorkerRequest) -> ValueResult[WorkerResponse]:
        if request is None:
            return log_and_fail(logger, "Worker request cannot be null")
        if not is_valid_input_string(request.name):
            return log_and_fail(logger, "Worker name must be provided")
        if not is_valid_input_string(request.department):
            return log_and_fail(logger, "Worker department must be provided")

        try:
            worker = self._workers.add(
                Worker(
                    name=request.name.strip(),
                    department=request.department.strip(),
                    email=_clean(request.email),
                    phone_number=_clean(request.phone_number),
                )
            )
            logger.info("Created worker id=%s", worker.id)
            return ValueResult.ok(WorkerResponse.from_model(worker))
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e)

    def update_worker(self, worker_id: int, request: UpdateWorkerRequest) -> ValueResult[WorkerResponse]:
        if not is_valid_numeric_input(worker_id):
            return log_and_fail(logger, _invalid_id(worker_id))
        if request is None:
            return log_and_fail(logger, "Update worker request cannot be null")

        changes = {
            "name": _clean(request.name),
            "department": _clean(request.department),
            "email": _clean(request.email),
            "phone_number": _clean(request.phone_number),
        }
        changes = {field: value for field, value in changes.items() if value is not None}

        try:
            worker = self._workers.get_by_id(worker_id)
            if worker is None:
                return log_and_fail(logger, f"No worker with id = {worker_id} found in the database, nothing updated")
            if not changes:
                return log_and_fail(logger, "In order to update there must be at least one field provided")

            for field, value in changes.items():
                setattr(worker, field, value)

            worker = self._workers.save(worker)
            logger.info("Updated worker id=%s fields=%s", worker_id, sorted(changes))
            return ValueResult.ok(WorkerResponse.from_model(worker))
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e)

    def delete_worker(self, worker_id: int) -> Result:
        if not is_valid_numeric_input(worker_id):
            return log_and_fail(logger, _invalid_id(worker_id), result_type=Result)

        try:
            worker = self._workers.get_by_id(worker_id)
            if worker is None:
                return log_and_fail(logger, f"There is no worker in the database with id = {worker_id}", result_type=Result)

            # Shifts go with the worker (cascade).
            self._workers.delete(worker)
            logger.info("Deleted worker id=%s", worker_id)
            return Result.ok()
        except SQLAlchemyError as e:
            return log_and_fail(logger, f"There was an error updating the database: {e}", e, result_type=Result)
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred: {e}", e, result_type=Result)

    def get_worker_by_id(self, worker_id: int) -> ValueResult[WorkerResponse]:
        if not is_valid_numeric_input(worker_id):
            return log_and_fail(logger, _invalid_id(worker_id))

        try:
            worker = self._workers.get_by_id(worker_id)
            if worker is None:
                return log_and_fail(logger, f"There is no worker in the database with id = {worker_id}")
            return ValueResult.ok(WorkerResponse.from_model(worker))
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred while loading workers: {e}", e)

    def search_workers_by_name(self, fragment: str) -> ValueResult[List[WorkerResponse]]:
        if not is_valid_input_string(fragment):
            return log_and_fail(logger, "Worker's name cannot be null or blank")

        try:
            workers = self._workers.search_by_name(fragment.strip())
            return ValueResult.ok([WorkerResponse.from_model(w) for w in workers])
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred while loading workers: {e}", e)

    def get_all_workers(self) -> ValueResult[List[WorkerResponse]]:
        try:
            return ValueResult.ok([WorkerResponse.from_model(w) for w in self._workers.list_all()])
        except Exception as e:
            return log_and_fail(logger, f"An unexpected error occurred while loading workers: {e}", e)
