# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from colorama import Style, just_fix_windows_console

just_fix_windows_console()


def print_banner(stream: TextIO | None = None):
    banner = r"""
  ____  _        ____
 | __ )| |_ ___ |  _ \  __ _  ___ _ __ ___   ___  _ __
 |  _ \| __/ __|| | | |/ _` |/ _ \ '_ ` _ \ / _ \| '_ \
 | |_) | || (__ | |_| | (_| |  __/ | | | | | (_) | | | |
 |____/ \__\___||____/ \__,_|\___|_| |_| |_|\___/|_| |_|

                        Bitcoin full node daemon
    """
    print(banner, file=stream or sys.stdout)


# -----------------------------
# BOXED NOTICES
# -----------------------------

def format_notice(lines: Iterable[str], emphasize: Iterable[str] = ()) -> str:
    """Render lines as a left-ruled block; lines in `emphasize` are bold."""
    bold = set(emphasize)
    out = [""]
    for line in lines:
        text = f"| {line}".rstrip()
        if line in bold:
            text = f"{Style.BRIGHT}{text}{Style.RESET_ALL}"
        out.append(text)
    return "\n".join(out) + "\n"


def print_notice(lines: Iterable[str], emphasize: Iterable[str] = (), stream: TextIO | None = None) -> None:
    print(format_notice(lines, emphasize), file=stream or sys.stdout)
