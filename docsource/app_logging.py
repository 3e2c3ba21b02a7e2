"""Connector and access logging setup.

This module centralizes logging configuration for the connector service:

- A small JSON formatter (opt-in via LOG_JSON) or a human-readable formatter.
- Timed rotation of the connector log (connector.log) and the HTTP access log
  (access.log), honoring retention and timezone options.
- An HTTP middleware that records one access line per request (method, path,
  status, latency, client IP) tagged with an X-Request-Id.

Environment variables: LOG_DIR, LOG_LEVEL, LOG_JSON, LOG_RETENTION_DAYS,
LOG_ROTATE_UTC.
"""

from __future__ import annotations

import json
import logging
import os
import time
from logging.handlers import TimedRotatingFileHandler
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request

CONNECTOR_LOGGER = "docsource"
ACCESS_LOGGER = "uvicorn.access"


class JsonFormatter(logging.Formatter):
    """Minimal JSON log formatter used when LOG_JSON=true."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def _get_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        return JsonFormatter()
    return logging.Formatter("[%(asctime)s] %(levelname)s in %(name)s: %(message)s")


def get_log_config() -> dict[str, Any]:
    """Return the effective logging options read from the environment."""

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    return {
        "log_dir": os.path.abspath(os.getenv("LOG_DIR", "logs")),
        "log_level": logging.getLevelName(getattr(logging, log_level_str, logging.INFO)),
        "log_json": os.getenv("LOG_JSON", "false").lower() == "true",
        "retention_days": int(os.getenv("LOG_RETENTION_DAYS", "7")),
        "rotate_utc": os.getenv("LOG_ROTATE_UTC", "false").lower() == "true",
    }


def _rotating_handler(path: str, options: dict[str, Any]) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        path,
        when="midnight",
        backupCount=options["retention_days"],
        utc=options["rotate_utc"],
    )
    handler.setFormatter(_get_formatter(options["log_json"]))
    return handler


def _install_access_logging(app: FastAPI) -> None:
    """Install the request access logging middleware.

    Health probes are skipped. The request id is taken from the incoming
    X-Request-Id header when present and echoed back on the response.
    """

    skip_paths = {"/api/health"}
    access_logger = logging.getLogger(ACCESS_LOGGER)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if request.url.path in skip_paths:
            return await call_next(request)

        request_id = request.headers.get("X-Request-Id") or uuid4().hex
        request.state.request_id = request_id
        start = time.time()

        response = await call_next(request)

        client_ip = request.headers.get("X-Forwarded-For")
        if not client_ip and request.client is not None:
            client_ip = request.client.host

        log_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "latency_ms": round((time.time() - start) * 1000, 2),
            "client_ip": client_ip,
        }
        response.headers["X-Request-Id"] = request_id
        access_logger.info(json.dumps(log_data, default=str))
        return response


def init_logging(app: FastAPI | None = None) -> None:
    """Initialise the connector logger and, for an app, access logging."""

    options = get_log_config()
    os.makedirs(options["log_dir"], exist_ok=True)
    log_level = getattr(logging, options["log_level"], logging.INFO)

    connector_logger = logging.getLogger(CONNECTOR_LOGGER)
    if not connector_logger.handlers:
        connector_logger.addHandler(
            _rotating_handler(os.path.join(options["log_dir"], "connector.log"), options)
        )
    connector_logger.setLevel(log_level)

    if app is None:
        return

    access_logger = logging.getLogger(ACCESS_LOGGER)
    access_logger.handlers.clear()
    access_logger.addHandler(
        _rotating_handler(os.path.join(options["log_dir"], "access.log"), options)
    )
    access_logger.setLevel(log_level)
    _install_access_logging(app)
