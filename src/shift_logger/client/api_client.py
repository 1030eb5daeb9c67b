"""HTTP client for the shift-logger API.

Every method returns the same ``Result`` / ``ValueResult`` contract the
services use, so the console never has to tell local failures from remote
ones. Transport errors, non-2xx answers and malformed bodies are mapped to
failure messages here and never raised past this module.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

import requests

from ..core.constants import CANCELLED_MESSAGE, DEFAULT_API_TIMEOUT_SECONDS, SHIFTS_PATH, WORKERS_PATH
from ..core.exceptions import ValidationError
from ..core.result import Result, ValueResult, log_and_fail
from ..shifts.dto import CreateShiftRequest, ShiftResponse, UpdateShiftRequest
from ..workers.dto import CreateWorkerRequest, UpdateWorkerRequest, WorkerResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PARSE_ERRORS = (ValidationError, ValueError, TypeError, KeyError)


def _list_of(parse: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    def parse_list(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise ValidationError("Expected a JSON array")
        return [parse(item) for item in data]

    return parse_list


def _error_text(response: requests.Response) -> str:
    """Prefer the ``message`` field of a JSON error body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.text


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._timeout = timeout

    # --- workers ---------------------------------------------------------

    def create_worker(self, request: CreateWorkerRequest) -> ValueResult[WorkerResponse]:
        return self._send("POST", WORKERS_PATH, WorkerResponse.from_dict, payload=request.to_dict())

    def update_worker(self, worker_id: int, request: UpdateWorkerRequest) -> ValueResult[WorkerResponse]:
        return self._send("PUT", f"{WORKERS_PATH}/{worker_id}", WorkerResponse.from_dict, payload=request.to_dict())

    def delete_worker(self, worker_id: int) -> Result:
        return self._send_no_content("DELETE", f"{WORKERS_PATH}/{worker_id}")

    def get_worker_by_id(self, worker_id: int) -> ValueResult[WorkerResponse]:
        return self._send("GET", f"{WORKERS_PATH}/{worker_id}", WorkerResponse.from_dict)

    def get_workers(self, name_filter: Optional[str] = None) -> ValueResult[List[WorkerResponse]]:
        params = {"name": name_filter} if name_filter and name_filter.strip() else None
        return self._send("GET", WORKERS_PATH, _list_of(WorkerResponse.from_dict), params=params)

    # --- shifts ----------------------------------------------------------

    def create_shift(self, request: CreateShiftRequest) -> ValueResult[ShiftResponse]:
        return self._send("POST", SHIFTS_PATH, ShiftResponse.from_dict, payload=request.to_dict())

    def update_shift(self, shift_id: int, request: UpdateShiftRequest) -> ValueResult[ShiftResponse]:
        return self._send("PUT", f"{SHIFTS_PATH}/{shift_id}", ShiftResponse.from_dict, payload=request.to_dict())

    def delete_shift(self, shift_id: int) -> Result:
        return self._send_no_content("DELETE", f"{SHIFTS_PATH}/{shift_id}")

    def get_shift_by_id(self, shift_id: int) -> ValueResult[ShiftResponse]:
        return self._send("GET", f"{SHIFTS_PATH}/{shift_id}", ShiftResponse.from_dict)

    def get_shifts(self, worker_id: Optional[int] = None) -> ValueResult[List[ShiftResponse]]:
        path = SHIFTS_PATH if worker_id is None else f"{SHIFTS_PATH}/worker/{worker_id}"
        return self._send("GET", path, _list_of(ShiftResponse.from_dict))

    # --- transport -------------------------------------------------------

    def _request(self, method: str, path: str, payload: Any = None, params: Optional[dict] = None):
        """Perform the call; return ``(response, None)`` or ``(None, failure message)``."""
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            return self._session.request(method, url, json=payload, params=params, timeout=self._timeout), None
        except KeyboardInterrupt:
            logger.warning("%s %s cancelled by user", method, url)
            return None, CANCELLED_MESSAGE
        # Timeout before ConnectionError: ConnectTimeout is both.
        except requests.Timeout as e:
            return None, f"Request timeout: {e}"
        except requests.RequestException as e:
            return None, f"Network error: {e}"
        except Exception as e:
            return None, f"An unexpected error occurred: {e}"

    def _send(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        *,
        payload: Any = None,
        params: Optional[dict] = None,
    ) -> ValueResult[T]:
        response, error = self._request(method, path, payload, params)
        if error is not None:
            return log_and_fail(logger, error)

        if not response.ok:
            return log_and_fail(logger, f"API returned {response.status_code}: {_error_text(response)}")

        if not response.content or not response.content.strip():
            return log_and_fail(logger, "Empty response body")

        try:
            data = response.json()
        except ValueError as e:
            return log_and_fail(logger, f"JSON parse error: {e}")

        if data is None:
            return log_and_fail(logger, "Empty response body")

        try:
            return ValueResult.ok(parse(data))
        except _PARSE_ERRORS as e:
            return log_and_fail(logger, f"JSON parse error: {e}")

    def _send_no_content(self, method: str, path: str) -> Result:
        response, error = self._request(method, path)
        if error is not None:
            return log_and_fail(logger, error, result_type=Result)

        if not response.ok:
            return log_and_fail(
                logger, f"API returned {response.status_code}: {_error_text(response)}", result_type=Result
            )
        return Result.ok()

    def close(self) -> None:
        self._session.close()
