# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE

import pytest

from btcdaemon.core.settings import Settings
from btcdaemon.daemon.errors import ConfigLoadError, ConfigValidationError
from btcdaemon.daemon.loader import load_settings, validate_settings_shape
from btcdaemon.utils import config as CFG


def _write(tmp_path, body):
    path = tmp_path / "settings.py"
    path.write_text(body)
    return str(path)


def test_empty_file_gives_defaults_with_home(tmp_path):
    cfg = load_settings(_write(tmp_path, ""), "/srv/btc")
    assert isinstance(cfg, Settings)
    assert cfg.homedir == "/srv/btc"
    assert cfg.network.port == CFG.LIVENET_PORT
    assert cfg.jsonrpc.port == CFG.LIVENET_RPC_PORT
    assert not cfg.jsonrpc.enable
    assert cfg.verify and cfg.verify_scripts


def test_file_can_edit_defaults_in_place(tmp_path):
    cfg = load_settings(_write(tmp_path, "cfg.network.port = 1234\ncfg.mods = 'bar'\n"), "/h")
    assert cfg.network.port == 1234
    assert cfg.mods == "bar"
    assert cfg.homedir == "/h"


def test_returned_settings_replace_defaults(tmp_path):
    body = (
        "settings = Settings()\n"
        "settings.set_testnet_defaults()\n"
        "settings.network.initial_peers = ['10.0.0.1']\n"
        "cfg.network.port = 1\n"
    )
    cfg = load_settings(_write(tmp_path, body), "/h")
    assert cfg.network.type == "testnet"
    assert cfg.network.port == CFG.TESTNET_PORT
    assert cfg.network.initial_peers == ["10.0.0.1"]
    # the pre-populated instance, including its homedir, is discarded
    assert cfg.homedir is None


def test_syntax_error_is_a_load_error(tmp_path):
    path = _write(tmp_path, "cfg.network.port = (\n")
    with pytest.raises(ConfigLoadError) as exc:
        load_settings(path, None)
    assert "SyntaxError" in exc.value.details
    assert exc.value.path == path


def test_runtime_error_carries_traceback(tmp_path):
    path = _write(tmp_path, "raise RuntimeError('boom from settings')\n")
    with pytest.raises(ConfigLoadError) as exc:
        load_settings(path, None)
    assert "boom from settings" in exc.value.details
    assert "Traceback" in exc.value.details


def test_non_settings_object_is_a_validation_error(tmp_path):
    path = _write(tmp_path, "settings = {'network': {'port': 1}}\n")
    with pytest.raises(ConfigValidationError) as exc:
        load_settings(path, None)
    assert "dict" in exc.value.problem


def test_broken_shape_is_a_validation_error(tmp_path):
    path = _write(tmp_path, "cfg.network.initial_peers = 'a,b'\n")
    with pytest.raises(ConfigValidationError) as exc:
        load_settings(path, None)
    assert "initial_peers" in exc.value.problem


def test_load_and_validation_errors_are_distinct():
    assert not issubclass(ConfigLoadError, ConfigValidationError)
    assert not issubclass(ConfigValidationError, ConfigLoadError)


def test_shape_check_accepts_fresh_settings():
    assert validate_settings_shape(Settings()) is None
    assert validate_settings_shape(None) is not None


@pytest.mark.parametrize("body,field", [
    ("cfg.network.port = 70000\n", "network.port"),
    ("cfg.network.port = -1\n", "network.port"),
    ("cfg.network.port = '8333'\n", "network.port"),
    ("cfg.network.port = True\n", "network.port"),
    ("cfg.jsonrpc.port = 'abc'\n", "jsonrpc.port"),
    ("cfg.jsonrpc.port = 65536\n", "jsonrpc.port"),
])
def test_bad_port_in_file_is_a_validation_error(tmp_path, body, field):
    with pytest.raises(ConfigValidationError) as exc:
        load_settings(_write(tmp_path, body), None)
    assert field in exc.value.problem


@pytest.mark.parametrize("body,field", [
    ("cfg.network.no_listen = 'yes'\n", "network.no_listen"),
    ("cfg.jsonrpc.enable = 1\n", "jsonrpc.enable"),
    ("cfg.verify = None\n", "verify"),
    ("cfg.verify_scripts = 'false'\n", "verify_scripts"),
    ("cfg.mods = ['a', 'b']\n", "mods"),
])
def test_bad_toggle_types_are_validation_errors(tmp_path, body, field):
    with pytest.raises(ConfigValidationError) as exc:
        load_settings(_write(tmp_path, body), None)
    assert exc.value.problem.startswith(field)


def test_port_edges_in_file_are_accepted(tmp_path):
    cfg = load_settings(_write(tmp_path, "cfg.network.port = 0\ncfg.jsonrpc.port = 65535\n"), None)
    assert cfg.network.port == 0
    assert cfg.jsonrpc.port == 65535
