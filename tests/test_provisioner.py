# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE

import os

import pytest

from btcdaemon.daemon.errors import ProvisioningError
from btcdaemon.daemon.loader import load_settings
from btcdaemon.daemon.provisioner import EXAMPLE_CONFIG_PATH, ensure_config, resolve_config_file


def test_bundled_template_exists():
    assert os.path.isfile(EXAMPLE_CONFIG_PATH)


def test_existing_file_is_left_alone(tmp_path, capsys):
    target = tmp_path / "settings.py"
    target.write_text("cfg.network.port = 1\n")
    assert ensure_config(str(tmp_path / "settings")) == str(target)
    assert target.read_text() == "cfg.network.port = 1\n"
    assert capsys.readouterr().out == ""


def test_path_without_extension_resolves(tmp_path):
    (tmp_path / "settings.py").write_text("")
    assert resolve_config_file(str(tmp_path / "settings")) == str(tmp_path / "settings.py")
    assert resolve_config_file(str(tmp_path / "other")) is None


def test_missing_config_is_created_from_template(tmp_path, capsys):
    target = tmp_path / "deep" / "home" / "testnet" / "settings"
    created = ensure_config(str(target))

    assert created == str(target) + ".py"
    with open(created, "rb") as fh, open(EXAMPLE_CONFIG_PATH, "rb") as tpl:
        assert fh.read() == tpl.read()
    out = capsys.readouterr().out
    assert created in out
    assert "created a new default config file" in out


def test_created_config_is_loadable(tmp_path):
    created = ensure_config(str(tmp_path / "settings"), announce=False)
    cfg = load_settings(created, str(tmp_path))
    assert cfg.homedir == str(tmp_path)


def test_no_temp_files_left_behind(tmp_path):
    ensure_config(str(tmp_path / "settings"), announce=False)
    assert sorted(os.listdir(tmp_path)) == ["settings.py"]


def test_missing_template_is_fatal_and_leaves_no_file(tmp_path):
    template = tmp_path / "nope.example.py"
    target = tmp_path / "home" / "settings"
    with pytest.raises(ProvisioningError) as exc:
        ensure_config(str(target), template=str(template))
    err = exc.value
    assert err.target == str(target) + ".py"
    assert err.template == str(template)
    assert not os.path.exists(err.target)
    assert os.listdir(tmp_path / "home") == []


def test_unwritable_parent_is_fatal(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file, not a directory")
    with pytest.raises(ProvisioningError) as exc:
        ensure_config(str(blocker / "home" / "settings"))
    assert str(blocker) in exc.value.target
    assert exc.value.template == EXAMPLE_CONFIG_PATH
