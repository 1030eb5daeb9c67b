from __future__ import annotations

from flask import Flask, request

from ..common.http import error_response, result_response
from ..core.constants import WORKERS_PATH
from ..core.exceptions import ValidationError
from ..container import Container
from .dto import CreateWorkerRequest, UpdateWorkerRequest


def _serialize_list(workers):
    return [w.to_dict() for w in workers]


def _serialize(worker):
    return worker.to_dict()


def register(app: Flask, container: Container) -> None:
    @app.route(WORKERS_PATH, methods=["GET"], endpoint="list_workers")
    def list_workers():
        name = request.args.get("name")
        if name:
            result = container.worker_service.search_workers_by_name(name)
        else:
            result = container.worker_service.get_all_workers()
        return result_response(result, failure_status=404, serialize=_serialize_list)

    @app.route(f"{WORKERS_PATH}/<int(signed=True):worker_id>", methods=["GET"], endpoint="get_worker")
    def get_worker(worker_id: int):
        result = container.worker_service.get_worker_by_id(worker_id)
        return result_response(result, failure_status=404, serialize=_serialize)

    @app.route(WORKERS_PATH, methods=["POST"], endpoint="create_worker")
    def create_worker():
        try:
            payload = CreateWorkerRequest.from_dict(request.get_json(silent=True))
        except ValidationError as e:
            return error_response(str(e), 400)

        result = container.worker_service.create_worker(payload)
        return result_response(
            result,
            failure_status=400,
            success_status=201,
            serialize=_serialize,
            location=lambda w: f"{WORKERS_PATH}/{w.id}",
        )

    @app.route(f"{WORKERS_PATH}/<int(signed=True):worker_id>", methods=["PUT"], endpoint="update_worker")
    def update_worker(worker_id: int):
        try:
            payload = UpdateWorkerRequest.from_dict(request.get_json(silent=True))
        except ValidationError as e:
            return error_response(str(e), 400)

        result = container.worker_service.update_worker(worker_id, payload)
        return result_response(result, failure_status=400, serialize=_serialize)

    @app.route(f"{WORKERS_PATH}/<int(signed=True):worker_id>", methods=["DELETE"], endpoint="delete_worker")
    def delete_worker(worker_id: int):
        result = container.worker_service.delete_worker(worker_id)
        return result_response(result, failure_status=400)
