"""Error Hierarchy — typed failures raised by the leader store.

Invariants:
    - Every error carries a kind (ErrorKind) and a code (str); http_status is
      derived from the kind through KIND_STATUS, the only kind-to-status table
    - Every message contains the substring its kind maps to in
      status_for_message() (core/error_translator.py), so kind-based and
      text-based classification always agree
    - No request data besides the offending identifier is echoed in messages

Design Decisions:
    - ErrorKind enum over message sniffing: the terminal handler matches on kind,
      message text is kept only for clients that still parse it
    - Single base class: one FastAPI handler catches every store failure
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure classification produced directly by the store."""
    VALIDATION = "validation"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.DUPLICATE_KEY: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class LeaderServiceError(Exception):
    """Base exception for all leader service failures."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind

    @property
    def http_status(self) -> int:
        return KIND_STATUS[self.kind]


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(LeaderServiceError):
    """Leader fields missing, empty or of the wrong type."""
    def __init__(self, details: str):
        super().__init__(
            f"Leader validation failed: {details}",
            "VALIDATION_ERROR", ErrorKind.VALIDATION,
        )
        self.details = details


class DuplicateKeyError(LeaderServiceError):
    """Unique constraint on (firstName, lastName) violated."""
    def __init__(self, first_name: str | None, last_name: str | None):
        super().__init__(
            f"duplicate key: leader '{first_name} {last_name}' already exists",
            "DUPLICATE_KEY", ErrorKind.DUPLICATE_KEY,
        )
        self.first_name = first_name
        self.last_name = last_name


class NotFoundError(LeaderServiceError):
    """Identifier malformed, or no leader matches it."""
    def __init__(self, leader_id: str):
        super().__init__(
            f"Leader lookup by ObjectId failed for value '{leader_id}'",
            "NOT_FOUND", ErrorKind.NOT_FOUND,
        )
        self.leader_id = leader_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(LeaderServiceError):
    """Database operation failed for a reason the client cannot fix."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} error: {message}",
            "DATABASE_ERROR", ErrorKind.INTERNAL,
        )
        self.operation = operation
