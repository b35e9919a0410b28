"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import time
import uuid

from flask import Flask, g, request

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER = "calc_server"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger under the ``calc_server`` hierarchy.

    Only the root of the hierarchy gets a handler; plugin loggers propagate
    to it.
    """

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_level(level: str | int | None) -> None:
    if level is None:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            return
    get_logger().setLevel(level)


def install_request_logging(app: Flask) -> None:
    logger = get_logger("requests")

    @app.before_request
    def _begin_request() -> None:
        g.request_id = uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        logger.info(
            "%s %s -> %s in %.2f ms (request %s)",
            request.method,
            request.path,
            response.status_code,
            duration_ms,
            getattr(g, "request_id", "-"),
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error(
                "request %s failed on %s",
                getattr(g, "request_id", "-"),
                request.path,
                exc_info=exc,
            )


__all__ = ["configure_level", "get_logger", "install_request_logging"]
