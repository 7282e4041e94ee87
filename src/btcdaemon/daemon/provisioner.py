# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations

import os, tempfile
from typing import Optional

# ---------------- Local Project ----------------
from ..utils import config as CFG
from ..utils.daemon_logging import get_ctx_logger
from ..utils.helpers import print_notice
from .errors import ProvisioningError

log = get_ctx_logger("btcdaemon.daemon.provisioner")

EXAMPLE_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), CFG.EXAMPLE_SETTINGS)


def resolve_config_file(path: str) -> Optional[str]:
    """Return the loadable file behind `path` (with or without extension), if any."""
    candidates = [path]
    if not path.endswith(CFG.SETTINGS_EXT):
        candidates.append(path + CFG.SETTINGS_EXT)
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    return None


def ensure_config(path: str, template: str = EXAMPLE_CONFIG_PATH, announce: bool = True) -> str:
    """Make sure a settings file exists at `path`, copying `template` if needed.

    Returns the path of the loadable file. Raises ProvisioningError when the
    directory or the copy cannot be created; the target is never left
    half-written.
    """
    existing = resolve_config_file(path)
    if existing:
        log.trace("Config file found at %s", existing)
        return existing

    target = path if path.endswith(CFG.SETTINGS_EXT) else path + CFG.SETTINGS_EXT
    target = os.path.abspath(target)
    template = os.path.abspath(template)

    try:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        _copy_atomic(template, target)
    except OSError as exc:
        log.error("Unable to automatically create config file: %s", exc, extra={"path": target})
        raise ProvisioningError(target, template, str(exc)) from exc

    created = resolve_config_file(target)
    if not created:
        log.error("Unable to automatically create config file: file missing after copy", extra={"path": target})
        raise ProvisioningError(target, template, "file missing after copy")

    log.info("Automatically created config file", extra={"path": created})
    if announce:
        print_notice(
            [
                "BtcDaemon created a new default config file at:",
                created,
                "",
                "Please edit it to suit your requirements, for example to enable JSON-RPC.",
            ],
            emphasize=["Please edit it to suit your requirements, for example to enable JSON-RPC."],
        )
    return created


def print_provisioning_failure(err: ProvisioningError) -> None:
    print_notice([
        "BtcDaemon was unable to locate or create a config file at:",
        err.target,
        "",
        "Please create a config file in this location or provide the correct path",
        "to your config using the --config=/path/to/settings.py option.",
        "",
        "To get started you can copy the example config file from here:",
        err.template,
    ])


def _copy_atomic(src: str, dest: str) -> None:
    with open(src, "rb") as handle:
        payload = handle.read()

    tmp_fd, tmp_path = tempfile.mkstemp(prefix=".settings_", suffix=".tmp", dir=os.path.dirname(dest))
    try:
        with os.fdopen(tmp_fd, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, dest)
    except OSError:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise


__all__ = ["EXAMPLE_CONFIG_PATH", "ensure_config", "print_provisioning_failure", "resolve_config_file"]
