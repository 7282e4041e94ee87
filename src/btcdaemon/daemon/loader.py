# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

"""
Settings files are plain python. They run with two names pre-bound:

    cfg       the default Settings instance (livenet preset, resolved homedir)
    Settings  the Settings class

A file may edit ``cfg`` in place, or bind a brand new object to a top-level
``settings`` name, which then replaces the defaults wholesale.
"""

from __future__ import annotations

import runpy, traceback
from typing import Any, Optional

# ---------------- Local Project ----------------
from ..core.settings import NetworkSettings, RpcSettings, Settings
from ..utils import config as CFG
from ..utils.daemon_logging import get_ctx_logger
from .errors import ConfigLoadError, ConfigValidationError

log = get_ctx_logger("btcdaemon.daemon.loader")

RESULT_NAME = "settings"


def evaluate_settings_file(path: str, home_dir: Optional[str]) -> Any:
    cfg = Settings()
    cfg.homedir = home_dir
    try:
        namespace = runpy.run_path(
            path,
            init_globals={"cfg": cfg, "Settings": Settings},
            run_name="btcdaemon_settings",
        )
    except Exception as exc:
        raise ConfigLoadError(path, traceback.format_exc()) from exc

    returned = namespace.get(RESULT_NAME)
    if returned is not None:
        log.debug("Settings file %s provided its own settings object", path)
        return returned
    return cfg


def _is_port(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and CFG.PORT_MIN <= value <= CFG.PORT_MAX


def validate_settings_shape(obj: Any) -> Optional[str]:
    """Return a description of the first structural problem, or None."""
    if not isinstance(obj, Settings):
        return f"expected Settings, got {type(obj).__name__}"
    if not isinstance(getattr(obj, "network", None), NetworkSettings):
        return "network section missing"
    if not isinstance(getattr(obj, "jsonrpc", None), RpcSettings):
        return "jsonrpc section missing"
    for name in ("initial_peers", "force_peers", "seeds"):
        if not isinstance(getattr(obj.network, name, None), list):
            return f"network.{name} must be a list"
    if not isinstance(getattr(obj, "log_levels", None), dict):
        return "log_levels must be a dict"
    for label, port in (("network.port", obj.network.port), ("jsonrpc.port", obj.jsonrpc.port)):
        if not _is_port(port):
            return f"{label} must be an integer in [{CFG.PORT_MIN}, {CFG.PORT_MAX}], got {port!r}"
    for label, flag in (
        ("network.no_listen", obj.network.no_listen),
        ("jsonrpc.enable", obj.jsonrpc.enable),
        ("verify", obj.verify),
        ("verify_scripts", obj.verify_scripts),
    ):
        if not isinstance(flag, bool):
            return f"{label} must be True or False, got {flag!r}"
    if obj.mods is not None and not isinstance(obj.mods, str):
        return "mods must be a comma-separated string"
    return None


def load_settings(path: str, home_dir: Optional[str]) -> Settings:
    settings = evaluate_settings_file(path, home_dir)
    problem = validate_settings_shape(settings)
    if problem:
        raise ConfigValidationError(path, problem)
    log.trace("Loaded %r from %s", settings, path)
    return settings


__all__ = ["evaluate_settings_file", "load_settings", "validate_settings_shape"]
