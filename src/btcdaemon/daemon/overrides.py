# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Tuple

# ---------------- Local Project ----------------
from ..core.settings import Settings
from ..utils import config as CFG
from ..utils.daemon_logging import enable_debug_channel, get_ctx_logger
from .options import ParsedOptions

log = get_ctx_logger("btcdaemon.daemon.overrides")

Applier = Callable[[Settings, Any], None]

_PORT_RE = re.compile(r"[+-]?[0-9]+")


def parse_port(value: Any) -> Optional[int]:
    """Integer in [PORT_MIN, PORT_MAX], or None when `value` is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        port = value
    else:
        text = str(value).strip()
        if not _PORT_RE.fullmatch(text):
            return None
        port = int(text)
    if port < CFG.PORT_MIN or port > CFG.PORT_MAX:
        return None
    return port


# ---- per-option appliers ----

def _set_homedir(cfg: Settings, value: str) -> None:
    cfg.homedir = value

def _set_datadir(cfg: Settings, value: str) -> None:
    cfg.datadir = value

def _add_nodes(cfg: Settings, values: list) -> None:
    cfg.network.initial_peers = cfg.network.initial_peers + list(values)

def _force_nodes(cfg: Settings, values: list) -> None:
    # rebuilds initial_peers from force_peers; force_peers itself is untouched
    cfg.network.initial_peers = cfg.network.force_peers + list(values)

def _set_connect(cfg: Settings, value: str) -> None:
    target: Any = value
    if "," in value:
        target = value.split(",")
    cfg.network.connect = target

def _set_no_listen(cfg: Settings, value: bool) -> None:
    cfg.network.no_listen = bool(value)

def _set_port(cfg: Settings, value: Any) -> None:
    port = parse_port(value)
    if port is None:
        log.error('Invalid port setting: "%s"', value)
        return
    cfg.network.port = port

def _set_rpc_user(cfg: Settings, value: str) -> None:
    cfg.jsonrpc.enable = True
    cfg.jsonrpc.username = value

def _set_rpc_password(cfg: Settings, value: str) -> None:
    cfg.jsonrpc.enable = True
    cfg.jsonrpc.password = value

def _set_rpc_port(cfg: Settings, value: Any) -> None:
    port = parse_port(value)
    if port is None:
        log.error('Invalid RPC port setting: "%s"', value)
        return
    cfg.jsonrpc.port = port

def _debug_flag(channel: str) -> Applier:
    def apply(cfg: Settings, value: bool) -> None:
        cfg.log_levels[channel] = 1
        enable_debug_channel(channel)
    apply.__name__ = f"_enable_{channel}"
    return apply

def _append_mods(cfg: Settings, value: str) -> None:
    prefix = cfg.mods + "," if isinstance(cfg.mods, str) and cfg.mods else ""
    cfg.mods = prefix + value

def _no_verify(cfg: Settings, value: bool) -> None:
    cfg.verify = False

def _no_verify_scripts(cfg: Settings, value: bool) -> None:
    cfg.verify_scripts = False


OVERRIDES: Tuple[Tuple[str, Applier], ...] = (
    ("homedir", _set_homedir),
    ("datadir", _set_datadir),
    ("addnode", _add_nodes),
    ("forcenode", _force_nodes),
    ("connect", _set_connect),
    ("nolisten", _set_no_listen),
    ("port", _set_port),
    ("rpcuser", _set_rpc_user),
    ("rpcpassword", _set_rpc_password),
    ("rpcport", _set_rpc_port),
    ("netdbg", _debug_flag("netdbg")),
    ("bchdbg", _debug_flag("bchdbg")),
    ("rpcdbg", _debug_flag("rpcdbg")),
    ("scrdbg", _debug_flag("scrdbg")),
    ("mods", _append_mods),
    ("noverify", _no_verify),
    ("noverifyscripts", _no_verify_scripts),
)


def apply_network_preset(options: ParsedOptions, cfg: Settings) -> Optional[str]:
    """Apply --livenet or --testnet (livenet wins); return the preset used."""
    if options.get("livenet"):
        cfg.set_livenet_defaults()
        return "livenet"
    if options.get("testnet"):
        cfg.set_testnet_defaults()
        return "testnet"
    return None


def apply_overrides(options: ParsedOptions, cfg: Settings) -> Settings:
    """Merge command-line values onto `cfg` in place and return it.

    The preset runs before the per-field rows so an explicit --port or
    --rpcport is not clobbered by it. Every other row is independent.
    """
    preset = apply_network_preset(options, cfg)
    if preset:
        log.debug("Applied %s preset", preset)

    for name, apply in OVERRIDES:
        if name not in options:
            continue
        value = options[name]
        if value is None or value is False or (isinstance(value, (str, list)) and not value):
            continue
        apply(cfg, value)
        log.trace("Override %s applied", name)
    return cfg


__all__ = ["OVERRIDES", "apply_network_preset", "apply_overrides", "parse_port"]
