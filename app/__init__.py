"""Application factory for the Calc Server platform."""

from __future__ import annotations

import importlib
import os
import pkgutil
from pathlib import Path
from typing import Iterable

import yaml
from flask import Flask
from werkzeug.exceptions import HTTPException

from common.errors import AppError, NotFoundAppError, ValidationAppError, ensure_app_error
from common.logging import configure_level, get_logger, install_request_logging
from common.responses import fail, ok

from . import config as config_module
from .blueprints import register_plugin_blueprints

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"

logger = get_logger(__name__)


def _load_yaml_config(path: Path | None = None) -> dict:
    path = path or Path(os.environ.get("CALC_SERVER_CONFIG", CONFIG_PATH))
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _discover_plugins(package: str = "plugins") -> Iterable[str]:
    """Yield import paths for all plugin packages."""

    package_path = Path(__file__).resolve().parent.parent / package
    if not package_path.exists():
        return []
    for module_info in pkgutil.iter_modules([str(package_path)]):
        if module_info.ispkg:
            yield f"{package}.{module_info.name}"


def _load_manifests(enabled: set[str], plugin_settings: dict) -> list[dict[str, str]]:
    manifests: list[dict[str, str]] = []
    for dotted in _discover_plugins():
        module = importlib.import_module(dotted)
        manifest = getattr(module, "manifest", None)
        if not manifest or manifest.get("blueprint") not in enabled:
            continue
        entry = dict(manifest)
        overrides = plugin_settings.get(entry["blueprint"], {}) or {}
        if overrides.get("summary"):
            entry["summary"] = overrides["summary"]
        manifests.append(entry)
    manifests.sort(key=lambda item: item["title"].lower())
    return manifests


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_module.BaseConfig)
    app.json.sort_keys = False

    yaml_config = _load_yaml_config()
    site_settings = yaml_config.get("site", {}) or {}
    plugin_settings = yaml_config.get("plugins", {}) or {}

    app.config["SITE_SETTINGS"] = site_settings
    if "max_content_length_kb" in site_settings:
        try:
            app.config["MAX_CONTENT_LENGTH"] = int(
                float(site_settings["max_content_length_kb"]) * 1024
            )
        except (TypeError, ValueError):
            logger.warning(
                "ignoring invalid max_content_length_kb %r",
                site_settings["max_content_length_kb"],
            )
    app.config["PLUGIN_SETTINGS"] = plugin_settings

    if config_name:
        config_obj = getattr(config_module, config_name, None)
        if config_obj:
            app.config.from_object(config_obj)

    if app.config.get("TESTING"):
        configure_level(app.config.get("LOG_LEVEL"))
    else:
        configure_level(site_settings.get("log_level") or app.config.get("LOG_LEVEL"))
    install_request_logging(app)

    enabled = register_plugin_blueprints(
        app, disabled=site_settings.get("disabled_plugins") or ()
    )
    app.config["PLUGIN_MANIFESTS"] = _load_manifests(set(enabled), plugin_settings)

    @app.after_request
    def apply_response_headers(response):
        """Attach strict security headers to every outgoing response."""

        configured = app.config.get("RESPONSE_HEADERS", {})
        for header, value in configured.items():
            if header not in response.headers:
                response.headers[header] = value
        return response

    @app.get("/")
    def home():
        return ok(
            {
                "title": site_settings.get("title", "Calc Server"),
                "plugins": app.config["PLUGIN_MANIFESTS"],
            }
        )

    @app.errorhandler(AppError)
    def app_error(error: AppError):
        return fail(error)

    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException):
        if error.code == 404:
            return fail(NotFoundAppError(message="Resource not found"))
        return fail(
            ValidationAppError(
                message=error.description or error.name,
                code=f"http.{error.code}",
                status_code=error.code or 400,
            )
        )

    @app.errorhandler(Exception)
    def server_error(error: Exception):
        logger.exception("unhandled error")
        return fail(ensure_app_error(error, fallback_code="server.unexpected"))

    return app


__all__ = ["create_app"]
