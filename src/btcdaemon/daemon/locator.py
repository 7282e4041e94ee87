# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# ---------------- Local Project ----------------
from ..core.settings import Settings
from ..utils import config as CFG
from ..utils.daemon_logging import get_ctx_logger
from .options import ParsedOptions

log = get_ctx_logger("btcdaemon.daemon.locator")

# Deprecated: settings file kept inside the installed package
LEGACY_SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), CFG.SETTINGS_BASENAME + CFG.SETTINGS_EXT)


@dataclass(frozen=True)
class ConfigLocation:
    config_path: str
    home_dir: Optional[str] = None
    legacy: bool = False


def default_home(testnet: bool = False) -> str:
    home = Settings.get_default_home()
    if testnet:
        home = home + "/" + CFG.TESTNET_SUBDIR
    return home


def locate_config(options: ParsedOptions, legacy_search: bool = True) -> ConfigLocation:
    explicit = options.get("config")
    if explicit:
        return ConfigLocation(config_path=os.path.abspath(explicit))

    if options.get("homedir"):
        home_dir = os.path.abspath(options["homedir"])
    else:
        home_dir = default_home(bool(options.get("testnet")))
    config_path = os.path.join(home_dir, CFG.SETTINGS_BASENAME)

    if legacy_search and os.path.isfile(LEGACY_SETTINGS_PATH):
        log.warning(
            "Using deprecated settings file %s; move it to %s%s",
            LEGACY_SETTINGS_PATH, config_path, CFG.SETTINGS_EXT,
        )
        return ConfigLocation(config_path=LEGACY_SETTINGS_PATH, home_dir=home_dir, legacy=True)

    return ConfigLocation(config_path=config_path, home_dir=home_dir)


__all__ = ["ConfigLocation", "LEGACY_SETTINGS_PATH", "default_home", "locate_config"]
