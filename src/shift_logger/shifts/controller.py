from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, result_response
from ..core.constants import SHIFTS_PATH
from ..core.exceptions import ValidationError
from ..container import Container
from .dto import CreateShiftRequest, UpdateShiftRequest


def _serialize_list(shifts):
    return [s.to_dict() for s in shifts]


def _serialize(shift):
    return shift.to_dict()


def register(app: Flask, container: Container) -> None:
    @app.route(SHIFTS_PATH, methods=["GET"], endpoint="list_shifts")
    def list_shifts():
        result = container.shift_service.get_all_shifts()
        return result_response(result, failure_status=404, serialize=_serialize_list)

    @app.route(f"{SHIFTS_PATH}/worker/<int(signed=True):worker_id>", methods=["GET"], endpoint="list_worker_shifts")
    def list_worker_shifts(worker_id: int):
        result = container.shift_service.get_shifts_by_worker_id(worker_id)
        return result_response(result, failure_status=404, serialize=_serialize_list)

    @app.route(f"{SHIFTS_PATH}/<int(signed=True):shift_id>", methods=["GET"], endpoint="get_shift")
    def get_shift(shift_id: int):
        result = container.shift_service.get_shift_by_id(shift_id)
        return result_response(result, failure_status=404, serialize=_serialize)

    @app.route(SHIFTS_PATH, methods=["POST"], endpoint="create_shift")
    def create_shift():
        try:
            payload = CreateShiftRequest.from_dict(request.get_json(silent=True))
        except ValidationError as e:
            return error_response(str(e), 400)

        result = container.shift_service.create_shift(payload)
        return result_response(
            result,
            failure_status=400,
            success_status=201,
            serialize=_serialize,
            location=lambda s: f"{SHIFTS_PATH}/{s.id}",
        )

    @app.route(f"{SHIFTS_PATH}/<int(signed=True):shift_id>", methods=["PUT"], endpoint="update_shift")
    def update_shift(shift_id: int):
        try:
            payload = UpdateShiftRequest.from_dict(request.get_json(silent=True))
        except ValidationError as e:
            return error_response(str(e), 400)

        result = container.shift_service.update_shift(shift_id, payload)
        return result_response(result, failure_status=400, serialize=_serialize)

    @app.route(f"{SHIFTS_PATH}/<int(signed=True):shift_id>", methods=["DELETE"], endpoint="delete_shift")
    def delete_shift(shift_id: int):
        result = container.shift_service.delete_shift(shift_id)
        return result_response(result, failure_status=400)
