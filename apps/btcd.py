# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

"""
BtcDaemon — node launcher

Role
- Resolves the daemon settings (config file + command-line flags) and
  hands them to the node factory.

Key flags
--config/-c     : Explicit settings file (skips home directory lookup).
--testnet       : Use the test network and the <home>/testnet directory.
--rpcuser/...   : Enable JSON-RPC with the given credentials.

Run `python apps/btcd.py --help` for the full list.
"""

import sys
from typing import Optional, Sequence

# ---------------- Local Project ----------------
from btcdaemon.core.settings import Settings
from btcdaemon.daemon.init import create_node
from btcdaemon.utils.daemon_logging import get_ctx_logger, setup_logging

log = get_ctx_logger("btcdaemon.apps.btcd")


class DaemonNode:
    """Hand-off point for the node runtime; reports what it was given."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def start(self) -> int:
        cfg = self.settings
        net = cfg.network
        log.info(
            "Node configured: net=%s port=%s listen=%s peers=%s connect=%s",
            net.type, net.port, not net.no_listen, net.initial_peers, net.connect,
            extra={"net": net.type},
        )
        log.info("Data directory: %s", cfg.data_path or "(no home directory)")
        if cfg.jsonrpc.enable:
            log.info("JSON-RPC enabled on port %s for user %s", cfg.jsonrpc.port, cfg.jsonrpc.username)
        if not cfg.verify:
            log.warning("Transaction/block verification is DISABLED")
        elif not cfg.verify_scripts:
            log.warning("Script verification is DISABLED")
        if cfg.mod_list():
            log.info("Mods: %s", ", ".join(cfg.mod_list()))
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    node = create_node(DaemonNode, argv, {"welcome": True})
    return node.start()


if __name__ == "__main__":
    setup_logging(force=True)
    sys.exit(main())
