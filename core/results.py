"""
Result types for Filehand operations.

Operations return an OperationResult instead of raising, so callers can
never mistake a failed read for an empty file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FailureKind(Enum):
    """Why an operation did not complete."""
    READ_FAILURE = "read_failure"
    WRITE_FAILURE = "write_failure"
    APPEND_FAILURE = "append_failure"
    INVALID_LINE_NUMBER = "invalid_line_number"
    MODIFY_FAILURE = "modify_failure"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    ALREADY_EXISTS = "already_exists"
    DELETE_FAILURE = "delete_failure"
    CREATE_FAILURE = "create_failure"
    LIST_FAILURE = "list_failure"


class FileOperationError(Exception):
    """Raised by OperationResult.unwrap() for a failed result."""

    def __init__(self, kind: FailureKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.cause = cause


@dataclass
class OperationResult:
    """Outcome of a single file operation."""
    success: bool
    value: Any = None
    failure: Optional[FailureKind] = None
    message: Optional[str] = None
    cause: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: Any = True) -> "OperationResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(
        cls,
        kind: FailureKind,
        message: str,
        cause: Optional[BaseException] = None
    ) -> "OperationResult":
        return cls(success=False, failure=kind, message=message, cause=cause)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> Any:
        """
        Return the value of a successful result.

        Raises:
            FileOperationError: If the operation failed
        """
        if not self.success:
            raise FileOperationError(self.failure, self.message or "", self.cause) from self.cause
        return self.value
