"""Error Translator — pure classification of failures into HTTP status codes.

Invariants:
    - Ordered table, first match wins: validation (400) → duplicate key (409)
      → objectid (404) → 500
    - "duplicate key" is matched case-sensitively, the others case-insensitively
    - No IO, no logging: the terminal handler in api/error_handlers.py does that

Design Decisions:
    - Typed errors classified by ErrorKind; the substring table only covers
      foreign exceptions that reach the handler without a kind
"""

from leader_service.core.errors import KIND_STATUS, ErrorKind, LeaderServiceError


def status_for_message(message: str) -> int:
    """Map error message text to a status code using the substring table."""
    lowered = message.lower()
    if "validation failed" in lowered:
        return 400
    if "duplicate key" in message:
        return 409
    if "objectid failed" in lowered:
        return 404
    return 500


def status_for_kind(kind: ErrorKind) -> int:
    return KIND_STATUS[kind]


def status_for_error(exc: BaseException) -> int:
    """Classify any exception: by kind when typed, by message text otherwise."""
    if isinstance(exc, LeaderServiceError):
        return status_for_kind(exc.kind)
    return status_for_message(str(exc))
