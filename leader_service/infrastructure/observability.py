"""Logging setup — one root handler, JSON lines or plain text.

Invariants:
    - Timestamps come from the LogRecord (UTC), not from format time
    - leader_id, error_code, path, status_code and page appear only when set
    - Repeated setup_logging calls replace the handler instead of stacking one
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("leader_id", "error_code", "path", "status_code", "page")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _LeaderServiceHandler(logging.StreamHandler):
    pass


def setup_logging(level: str = "INFO", fmt: str = "json"):
    root = logging.getLogger()
    for existing in [
        h for h in root.handlers if isinstance(h, _LeaderServiceHandler)
    ]:
        root.removeHandler(existing)

    handler = _LeaderServiceHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
