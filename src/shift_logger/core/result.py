"""Result types: the success/failure contract shared by every layer.

Services, the HTTP client and the console never raise for expected
failures. They return a ``Result`` (no payload) or a ``ValueResult`` and
the caller branches on ``is_success``.
"""
from __future__ import annotations

import logging
from typing import Generic, Optional, Type, TypeVar

from .exceptions import ResultStateError

T = TypeVar("T")
R = TypeVar("R", bound="Result")


class Result:
    """Outcome of an operation that has no payload (e.g. delete)."""

    def __init__(self, is_success: bool, error: Optional[str] = None):
        if is_success and error is not None:
            raise ResultStateError("A successful result cannot carry an error message")
        if not is_success and not error:
            raise ResultStateError("A failed result must carry an error message")

        self._is_success = is_success
        self._error = error

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def error(self) -> Optional[str]:
        return self._error

    @classmethod
    def ok(cls) -> "Result":
        return cls(True, None)

    @classmethod
    def fail(cls, message: str):
        return cls(False, message)

    def __repr__(self) -> str:
        if self._is_success:
            return f"{type(self).__name__}.ok()"
        return f"{type(self).__name__}.fail({self._error!r})"


class ValueResult(Result, Generic[T]):
    """Outcome that carries a value on success.

    ``value`` is only readable once success is confirmed; reading it on a
    failure raises ``ResultStateError``.
    """

    def __init__(self, is_success: bool, error: Optional[str] = None, value: Optional[T] = None):
        if is_success and value is None:
            raise ResultStateError("A successful result must carry a value")
        if not is_success and value is not None:
            raise ResultStateError("A failed result cannot carry a value")

        super().__init__(is_success, error)
        self._value = value

    @property
    def value(self) -> T:
        if not self._is_success:
            raise ResultStateError(f"Cannot read the value of a failed result: {self._error}")
        return self._value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T) -> "ValueResult[T]":  # type: ignore[override]
        return cls(True, None, value)

    def __repr__(self) -> str:
        if self._is_success:
            return f"ValueResult.ok({self._value!r})"
        return f"ValueResult.fail({self._error!r})"


def log_and_fail(
    logger: logging.Logger,
    message: str,
    exc: Optional[BaseException] = None,
    *,
    result_type: Type[R] = ValueResult,  # type: ignore[assignment]
) -> R:
    """Log ``message`` at ERROR level and return it as a failed result."""
    if exc is not None:
        logger.error(message, exc_info=exc)
    else:
        logger.error(message)
    return result_type.fail(message)
