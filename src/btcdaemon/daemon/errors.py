# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

from __future__ import annotations


class ConfigError(Exception):
    """Fatal configuration problem; the bootstrap exits with EXIT_CODE."""

    exit_code = 1


class ProvisioningError(ConfigError):
    def __init__(self, target: str, template: str, reason: str = ""):
        self.target = target
        self.template = template
        self.reason = reason
        msg = f"unable to create config file {target} from {template}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class ConfigLoadError(ConfigError):
    def __init__(self, path: str, details: str):
        self.path = path
        self.details = details
        super().__init__(f"error while loading configuration file {path}")


class ConfigValidationError(ConfigError):
    def __init__(self, path: str, problem: str):
        self.path = path
        self.problem = problem
        super().__init__(f"configuration file {path} did not provide a valid Settings object ({problem})")
