# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

"""
Command-line options recognized by the daemon bootstrap.

The table is static: every option defaults to "absent" so that the merge
stage only sees what the user actually typed.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

ParsedOptions = Mapping[str, Any]


class OptionKind(str, Enum):
    STRING = "string"
    LIST = "list"
    FLAG = "flag"
    SCALAR = "scalar"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    kind: OptionKind
    description: str
    short: Optional[str] = None

    @property
    def flags(self) -> tuple:
        long_flag = f"--{self.name}"
        return (f"-{self.short}", long_flag) if self.short else (long_flag,)


OPTIONS: tuple = (
    OptionSpec("config", OptionKind.STRING, "Configuration file", short="c"),
    OptionSpec("homedir", OptionKind.STRING, "Path to BtcDaemon home directory (default: per-user data dir)"),
    OptionSpec("datadir", OptionKind.STRING, "Data directory, relative to home dir (default: .)"),
    OptionSpec("addnode", OptionKind.LIST, "Add a node to connect to"),
    OptionSpec("forcenode", OptionKind.LIST, "Always maintain a connection to this node"),
    OptionSpec("connect", OptionKind.STRING, "Connect only to the specified node"),
    OptionSpec("nolisten", OptionKind.FLAG, "Disable incoming connections"),
    OptionSpec("livenet", OptionKind.FLAG, "Use the regular network (default)"),
    OptionSpec("testnet", OptionKind.FLAG, "Use the test network"),
    OptionSpec("port", OptionKind.SCALAR, "Port to listen for incoming connections", short="p"),
    OptionSpec("rpcuser", OptionKind.STRING, "Username for JSON-RPC connections"),
    OptionSpec("rpcpassword", OptionKind.STRING, "Password for JSON-RPC connections"),
    OptionSpec("rpcport", OptionKind.SCALAR, "Listen for JSON-RPC connections on <port> (default: 8432)"),
    OptionSpec("netdbg", OptionKind.FLAG, "Enable networking debug messages"),
    OptionSpec("bchdbg", OptionKind.FLAG, "Enable block chain debug messages"),
    OptionSpec("rpcdbg", OptionKind.FLAG, "Enable JSON RPC debug messages"),
    OptionSpec("scrdbg", OptionKind.FLAG, "Enable script parser/interpreter debug messages"),
    OptionSpec("mods", OptionKind.STRING, "Comma-separated list of mods to load", short="m"),
    OptionSpec("noverify", OptionKind.FLAG, "Disable all tx/block verification"),
    OptionSpec("noverifyscripts", OptionKind.FLAG, "Disable tx scripts verification"),
)

OPTIONS_BY_NAME = MappingProxyType({spec.name: spec for spec in OPTIONS})


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="BtcDaemon full node",
        argument_default=argparse.SUPPRESS,
    )
    for spec in OPTIONS:
        kwargs: dict = {"dest": spec.name, "help": spec.description}
        if spec.kind is OptionKind.FLAG:
            kwargs["action"] = "store_true"
        elif spec.kind is OptionKind.LIST:
            kwargs["action"] = "append"
            kwargs["metavar"] = "<host>"
        elif spec.kind is OptionKind.SCALAR:
            # kept as text; range checks happen when merging
            kwargs["metavar"] = "<port>"
        parser.add_argument(*spec.flags, **kwargs)
    return parser


def parse_options(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> ParsedOptions:
    """Parse argv (default: sys.argv[1:]) into a read-only name -> value map."""
    ns = build_parser(prog).parse_args(argv)
    return MappingProxyType(dict(vars(ns)))


__all__ = ["OptionKind", "OptionSpec", "OPTIONS", "OPTIONS_BY_NAME", "ParsedOptions", "build_parser", "parse_options"]
