import logging
import os
import uuid
from typing import Any, MutableMapping, Optional


DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | req=%(request_id)s | %(message)s"
NO_REQUEST = "-"


class RequestIdFilter(logging.Filter):
    """Fills in ``request_id`` for records logged outside an HTTP request."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not getattr(record, "request_id", None):
            record.request_id = NO_REQUEST
        return True


class RequestLogger(logging.LoggerAdapter):
    """Tags every record with the id of the generation request being served."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(kwargs.get("extra") or {}), **self.extra}
        return msg, kwargs


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Install a single stderr handler on the root logger."""
    resolved_level = getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    # uvicorn --reload re-imports the app
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)


def request_logger(name: str, request_id: Optional[str] = None) -> RequestLogger:
    """Logger bound to one request; a fresh id is generated when none is given."""
    return RequestLogger(get_logger(name), {"request_id": request_id or new_request_id()})
