from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    CONFIG_MISSING = "config_missing"
    INVALID_REQUEST = "invalid_request"
    UNAUTHORIZED = "unauthorized"
    GENERATION_UNAVAILABLE = "generation_unavailable"
    EMPTY_GENERATION = "empty_generation"
    INVALID_GENERATION = "invalid_generation"
    PERSISTENCE_FAILURE = "persistence_failure"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def caller_can_retry(self) -> bool:
        """False only for server misconfiguration; everything else is worth another attempt."""
        return self is not ErrorKind.CONFIG_MISSING


_STATUS_CODES = {
    ErrorKind.CONFIG_MISSING: 500,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.GENERATION_UNAVAILABLE: 502,
    ErrorKind.EMPTY_GENERATION: 502,
    ErrorKind.INVALID_GENERATION: 422,
    ErrorKind.PERSISTENCE_FAILURE: 500,
}


class PersistenceError(RuntimeError):
    """
    A store write failed.

    stage is "form" or "questions". For "questions" the form row is already
    committed and form_id names it.
    """

    def __init__(self, stage: str, message: str, form_id: Optional[str] = None):
        super().__init__(message)
        self.stage = stage
        self.message = message
        self.form_id = form_id
