"""Blueprint registration helpers."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Iterable

from flask import Blueprint, Flask

from common.logging import get_logger

logger = get_logger(__name__)


def _iter_blueprints(package: str = "plugins") -> Iterable[Blueprint]:
    module_path = Path(__file__).resolve().parent.parent / package
    if not module_path.exists():
        return []
    blueprints: list[Blueprint] = []
    for module_info in pkgutil.iter_modules([str(module_path)]):
        if not module_info.ispkg:
            continue
        dotted = f"{package}.{module_info.name}.api"
        module = importlib.import_module(dotted)
        blueprints.extend(getattr(module, "blueprints", None) or [])
    return blueprints


def register_plugin_blueprints(app: Flask, disabled: Iterable[str] = ()) -> list[str]:
    """Register every plugin API blueprint not listed in ``disabled``."""

    skipped = set(disabled)
    registered: list[str] = []
    for bp in _iter_blueprints():
        plugin = bp.name.removesuffix("_api")
        if plugin in skipped:
            logger.info("plugin %s disabled by configuration", plugin)
            continue
        app.register_blueprint(bp)
        registered.append(plugin)
    return registered


__all__ = ["register_plugin_blueprints"]
