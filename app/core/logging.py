from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from app.core.context import get_request_id
from app.config import get_settings

# the factory in place before configure_logging first ran; re-wrapping on
# every create_app() would stack request-id lookups
_base_record_factory = logging.getLogRecordFactory()


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _record_factory(*args, **kwargs) -> logging.LogRecord:
    record = _base_record_factory(*args, **kwargs)
    record.request_id = get_request_id() or "-"
    return record


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": utc_iso(),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "msg": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = utc_iso()
        request_id = getattr(record, "request_id", "-")
        base = (
            f"{ts} {record.levelname:<7} request_id={request_id} "
            f"[{record.threadName}] {record.name}: {record.getMessage()}"
        )
        if record.exc_info:
            return base + "\n" + self.formatException(record.exc_info)
        return base


def configure_logging() -> None:
    """
    Stdout logging for the service.

    The request id is stamped when a record is created, not by a handler
    filter, so records from RPC worker threads (see submit_in_context) and
    records seen by other handlers carry it too.
    """
    settings = get_settings()

    logging.setLogRecordFactory(_record_factory)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # noise control
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
