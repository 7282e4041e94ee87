# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations

import os
import appdirs
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

# ---------------- Local Project ----------------
from ..utils import config as CFG

ConnectTarget = Union[None, str, List[str]]


@dataclass
class NetworkSettings:
    type: str = "livenet"
    port: int = CFG.LIVENET_PORT
    magic: str = CFG.LIVENET_MAGIC
    address_version: int = CFG.LIVENET_ADDRESS_VERSION
    seeds: List[str] = field(default_factory=lambda: list(CFG.LIVENET_SEEDS))
    initial_peers: List[str] = field(default_factory=list)
    force_peers: List[str] = field(default_factory=list)
    connect: ConnectTarget = None
    no_listen: bool = False


@dataclass
class RpcSettings:
    enable: bool = False
    username: str = CFG.RPC_DEFAULT_USER
    password: Optional[str] = None
    port: int = CFG.LIVENET_RPC_PORT


def _default_log_levels() -> Dict[str, int]:
    return {name: 0 for name in CFG.DEBUG_CHANNELS}


class Settings:
    """Aggregate configuration handed to the node factory.

    A fresh instance carries the livenet preset. Settings files receive one
    as ``cfg`` and may either tweak it in place or bind a new instance to a
    top-level ``settings`` name.
    """

    def __init__(self) -> None:
        self.network = NetworkSettings()
        self.jsonrpc = RpcSettings()
        self.homedir: Optional[str] = None
        self.datadir: str = CFG.DEFAULT_DATADIR
        self.verify = True
        self.verify_scripts = True
        self.mods: Optional[str] = None
        self.log_levels: Dict[str, int] = _default_log_levels()
        self.set_livenet_defaults()

    @staticmethod
    def get_default_home() -> str:
        env_home = os.environ.get(CFG.HOME_ENV_VAR, "").strip()
        if env_home:
            return os.path.abspath(os.path.expanduser(env_home))
        return appdirs.user_data_dir(CFG.APP_NAME, CFG.APP_AUTHOR)

    # ---- network-mode presets ----

    def set_livenet_defaults(self) -> "Settings":
        net = self.network
        net.type = "livenet"
        net.port = CFG.LIVENET_PORT
        net.magic = CFG.LIVENET_MAGIC
        net.address_version = CFG.LIVENET_ADDRESS_VERSION
        net.seeds = list(CFG.LIVENET_SEEDS)
        self.jsonrpc.port = CFG.LIVENET_RPC_PORT
        return self

    def set_testnet_defaults(self) -> "Settings":
        net = self.network
        net.type = "testnet"
        net.port = CFG.TESTNET_PORT
        net.magic = CFG.TESTNET_MAGIC
        net.address_version = CFG.TESTNET_ADDRESS_VERSION
        net.seeds = list(CFG.TESTNET_SEEDS)
        self.jsonrpc.port = CFG.TESTNET_RPC_PORT
        return self

    @property
    def data_path(self) -> Optional[str]:
        if self.homedir is None:
            return None
        return os.path.normpath(os.path.join(self.homedir, self.datadir or CFG.DEFAULT_DATADIR))

    def mod_list(self) -> List[str]:
        if not self.mods:
            return []
        return [m.strip() for m in str(self.mods).split(",") if m.strip()]

    def to_dict(self) -> dict:
        return {
            "network": dict(vars(self.network)),
            "jsonrpc": dict(vars(self.jsonrpc)),
            "homedir": self.homedir,
            "datadir": self.datadir,
            "verify": self.verify,
            "verify_scripts": self.verify_scripts,
            "mods": self.mods,
            "log_levels": dict(self.log_levels),
        }

    def __repr__(self) -> str:
        return (
            f"Settings(net={self.network.type}, port={self.network.port}, "
            f"rpc={'on' if self.jsonrpc.enable else 'off'}:{self.jsonrpc.port}, homedir={self.homedir!r})"
        )


__all__ = ["Settings", "NetworkSettings", "RpcSettings"]
