"""
Domain Errors

Error kinds raised by stores, entities and file adapters.
Every error carries a `kind` string so callers can branch on it without
matching exception classes, and `attempt()` turns a raising call into an
explicit `OperationResult`.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional


class ErrorKind:
    """Error kind tags - one per DemoError subclass."""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MALFORMED_RECORD = "malformed_record"
    RESOURCE_ACCESS = "resource_access"


class DemoError(Exception):
    """Base class for every error the demos surface to callers."""
    kind: str = "error"


class DuplicateKeyError(DemoError):
    """An entity with the same identifier is already stored."""
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} already exists.")


class NotFoundError(DemoError):
    """No entity is stored under the identifier."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} was not found.")


class InvalidValueError(DemoError, ValueError):
    """A value violates a domain constraint (negative quantity, score out of range)."""
    kind = ErrorKind.INVALID_VALUE


class MalformedRecordError(DemoError, ValueError):
    """A record in an input file could not be parsed."""
    kind = ErrorKind.MALFORMED_RECORD

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class ResourceAccessError(DemoError):
    """A file could not be opened, read or written."""
    kind = ErrorKind.RESOURCE_ACCESS

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a store operation: either a value or a DemoError."""
    value: Any = None
    error: Optional[DemoError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        """Error kind, or None on success."""
        return self.error.kind if self.error is not None else None


def attempt(operation: Callable[..., Any], *args, **kwargs) -> OperationResult:
    """
    Run a store operation and capture its outcome.

    Only DemoError is captured; anything else is a bug and propagates.
    """
    try:
        return OperationResult(value=operation(*args, **kwargs))
    except DemoError as e:
        return OperationResult(error=e)
