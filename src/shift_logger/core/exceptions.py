class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a request payload is malformed or has the wrong types."""


class ResultStateError(DomainError):
    """Raised when a result is built inconsistently or read the wrong way.

    This is a programming error, not an expected failure, so it is never
    converted into a failed result.
    """
