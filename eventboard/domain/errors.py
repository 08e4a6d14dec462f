"""Domain error codes for the eventboard module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_FAILURE = "STORE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StoreFailureError(DomainError):
    """Raised when the store cannot persist pending changes."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Could not persist changes",
        )
        object.__setattr__(self, "reason", reason)
