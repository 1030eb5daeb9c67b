from __future__ import annotations

from typing import Any, Callable, Optional

from flask import jsonify

from ..core.result import Result, ValueResult


def error_response(message: str, status: int):
    return jsonify({"message": message}), status


def result_response(
    result: Result,
    *,
    failure_status: int,
    success_status: int = 200,
    serialize: Optional[Callable[[Any], Any]] = None,
    location: Optional[Callable[[Any], str]] = None,
):
    """Turn a service result into a Flask response.

    Payload-less successes answer 204; failures answer ``failure_status``
    with ``{"message": ...}``.
    """
    if result.is_failure:
        return error_response(result.error, failure_status)

    if not isinstance(result, ValueResult):
        return "", 204

    value = result.value
    body = serialize(value) if serialize else value
    headers = {"Location": location(value)} if location else {}
    return jsonify(body), success_status, headers
