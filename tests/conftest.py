# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE

import logging
import os
import sys

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(PROJECT_ROOT, "src")
for path in (PROJECT_ROOT, SRC_ROOT):
    if path not in sys.path:
        sys.path.append(path)

from btcdaemon.daemon import locator  # noqa: E402
from btcdaemon.utils import config as CFG  # noqa: E402


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Default home redirected into tmp_path; no legacy in-tree settings."""
    path = tmp_path / "home"
    monkeypatch.setenv(CFG.HOME_ENV_VAR, str(path))
    monkeypatch.setattr(locator, "LEGACY_SETTINGS_PATH", str(tmp_path / "no-legacy" / "settings.py"))
    return path


@pytest.fixture(autouse=True)
def reset_debug_channels():
    yield
    for name in CFG.DEBUG_CHANNELS.values():
        logging.getLogger(name).setLevel(logging.NOTSET)
