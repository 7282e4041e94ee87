# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

"""
Daemon bootstrap: options -> config path -> (provision) -> load -> overrides.

Any fatal configuration problem is logged and ends the process with a
non-zero status; the node factory only ever sees a fully merged Settings.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

# ---------------- Local Project ----------------
from ..core.settings import Settings
from ..utils.daemon_logging import get_ctx_logger
from ..utils.helpers import print_banner
from .errors import ConfigError, ConfigLoadError, ConfigValidationError, ProvisioningError
from .loader import load_settings
from .locator import locate_config
from .options import ParsedOptions, parse_options
from .overrides import apply_overrides
from .provisioner import ensure_config, print_provisioning_failure

log = get_ctx_logger("btcdaemon.daemon.init")

NodeT = TypeVar("NodeT")


def resolve_settings(options: ParsedOptions, legacy_search: bool = True) -> Settings:
    """Run the whole pipeline for already-parsed options; raises ConfigError."""
    location = locate_config(options, legacy_search=legacy_search)
    log.debug("Config path resolved to %s", location.config_path, extra={"path": location.config_path})
    config_file = ensure_config(location.config_path)
    settings = load_settings(config_file, location.home_dir)
    return apply_overrides(options, settings)


def _report(err: ConfigError) -> None:
    if isinstance(err, ProvisioningError):
        # already logged where it was raised
        print_provisioning_failure(err)
    elif isinstance(err, ConfigLoadError):
        log.error("Error while loading configuration file:\n\n%s", err.details)
    elif isinstance(err, ConfigValidationError):
        log.error("Configuration file did not provide a valid Settings object.\n(%s)", err.problem)
    else:
        log.error("Configuration error: %s", err)


def get_config(argv: Optional[Sequence[str]] = None, init_config: Optional[Mapping[str, Any]] = None) -> Settings:
    if not isinstance(init_config, Mapping):
        init_config = {}

    options = parse_options(argv)

    if init_config.get("welcome"):
        print_banner()

    log.info("Loading configuration")
    try:
        return resolve_settings(options, legacy_search=bool(init_config.get("legacy_search", True)))
    except ConfigError as err:
        _report(err)
        sys.exit(err.exit_code)


def create_node(
    factory: Callable[[Settings], NodeT],
    argv: Optional[Sequence[str]] = None,
    init_config: Optional[Mapping[str, Any]] = None,
) -> NodeT:
    cfg = get_config(argv, init_config)
    return factory(cfg)


__all__ = ["create_node", "get_config", "resolve_settings"]
