"""Log setup for the API: one JSON line per record, tagged with the request id.

The request middleware already logs every request once, so uvicorn's own
access log is silenced to avoid duplicate lines.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Mapping

from ..middlewares import request_id_ctx_var

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(request_id)s %(message)s"
QUIET_LOGGERS = ("uvicorn.access",)


class RequestIdFilter(logging.Filter):
    """Expose the in-flight request id as ``record.request_id`` ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get() or "-"
        return True


class JsonLogFormatter(logging.Formatter):
    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            payload["service"] = self.service
        request_id = request_id_ctx_var.get()
        if request_id:
            payload["request_id"] = request_id
        extra = getattr(record, "extra_data", None)
        if isinstance(extra, Mapping):
            payload.update(extra)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), default=str)


def setup_logging(level: str | int = logging.INFO, *, fmt: str = "json", service: str | None = None) -> None:
    """Install a single stream handler on the root logger.

    ``fmt`` is ``"json"`` for production or ``"text"`` for a readable local
    console; unknown values fall back to JSON.
    """

    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    if fmt == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonLogFormatter(service=service))
    logging.root.handlers = [handler]
    logging.root.setLevel(level.upper() if isinstance(level, str) else level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
