# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md
'''
HOW TO USE logging in your code:

log = get_ctx_logger("btcdaemon.daemon.loader")
log.trace("very technical details, usually unnecessary")
log.info("normal event / milestone")
log.debug("technical details for diagnosis")
log.warning("a non-fatal condition that needs attention")
log.error("handled error")
log.critical("fatal condition")
log.exception("context message when an exception occurs") >automatically include traceback

Subsystem debug output (--netdbg, --bchdbg, --rpcdbg, --scrdbg) is routed
through the loggers listed in CFG.DEBUG_CHANNELS; enable_debug_channel()
lowers one of them to DEBUG at runtime.
'''

from __future__ import annotations

import os, logging, re, json, time
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from btcdaemon.utils import config as CFG

# ===== TRACE level (below DEBUG) =====
TRACE = 9
logging.addLevelName(TRACE, "TRACE")
def _trace(self, msg, *a, **k):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, a, **k)
logging.Logger.trace = _trace

# =========================
# 1) Core logging setup
# =========================

if CFG.LOG_SHOW_PROCESS:
    _DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(processName)s %(name)s: %(message)s"
else:
    _DEFAULT_FMT = f"%(asctime)s [%(levelname)s] {CFG.LOG_PROC_PLACEHOLDER} %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class RedactFilter(logging.Filter):
    RE_RPC_FLAG = re.compile(r"(--rpcpassword[=\s]+)(\S+)", re.I)
    RE_PASSWORD = re.compile(r"((?:'|\")?password(?:'|\")?\s*[:=]\s*)('[^']*'|\"[^\"]*\"|[^\s,}]+)", re.I)
    def filter(self, record):
        msg = record.getMessage()
        msg = self.RE_RPC_FLAG.sub(r"\1[REDACTED]", msg)
        msg = self.RE_PASSWORD.sub(r"\1[REDACTED]", msg)
        record.msg, record.args = msg, None
        return True

class RateLimitFilter(logging.Filter):
    """Drop a record when the same (logger, level, template) fired within `min_interval` seconds."""

    def __init__(self, min_interval: float = 2.0):
        super().__init__()
        self.min_interval = float(min_interval)
        self._seen: dict[tuple, float] = {}

    def filter(self, record):
        key = (record.name, record.levelno, str(record.msg))
        now = time.monotonic()
        if now - self._seen.get(key, float("-inf")) < self.min_interval:
            return False
        self._seen[key] = now
        return True

class JsonFormatter(logging.Formatter):
    CONTEXT_FIELDS = ("net", "path")

    def format(self, record):
        proc = record.processName if CFG.LOG_SHOW_PROCESS else CFG.LOG_PROC_PLACEHOLDER
        payload = {
            "ts": self.formatTime(record, _DEFAULT_DATEFMT),
            "lvl": record.levelname,
            "logger": record.name,
            "proc": proc,
            "msg": record.getMessage(),
        }
        payload.update(
            (field, getattr(record, field))
            for field in self.CONTEXT_FIELDS
            if getattr(record, field, None) not in (None, "-")
        )
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

class SafeFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, "net"):  record.net  = "-"
        if not hasattr(record, "path"): record.path = "-"
        return super().format(record)

class ContextAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        for key, value in (self.extra or {}).items():
            extra.setdefault(key, value)
        extra.setdefault("net", "-")
        extra.setdefault("path", "-")
        return msg, kwargs

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def trace(self, msg, *args, **kwargs):
        if self.logger.isEnabledFor(TRACE):
            self.log(TRACE, msg, *args, **kwargs)


def get_ctx_logger(name: str = "btcdaemon", **ctx) -> ContextAdapter:
    return ContextAdapter(get_logger(name), ctx)

def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "btcdaemon")


def resolve_level(level: int | str) -> int:
    """Numeric level for `level`; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO

def _prepare_handler(handler: logging.Handler, as_json: bool, rate_seconds: float) -> logging.Handler:
    handler.setFormatter(JsonFormatter() if as_json else SafeFormatter(_DEFAULT_FMT, _DEFAULT_DATEFMT))
    handler.addFilter(RedactFilter())
    if rate_seconds > 0.0:
        handler.addFilter(RateLimitFilter(rate_seconds))
    return handler

def setup_logging(
    log_file: str | os.PathLike | None = None,
    level: int | str | None = None,
    to_console: bool | None = None,
    rotate_max_bytes: int | None = None,
    backup_count: int | None = None,
    force: bool = False,
) -> logging.Logger:
    """Install the file (and optional console) handler on the root logger.

    Arguments left as None take their value from the LOG_* profile in CFG.
    """
    log_path = Path(CFG.LOG_PATH if log_file is None else log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    lvl = resolve_level(CFG.LOG_LEVEL if level is None else level)
    to_console = CFG.LOG_TO_CONSOLE if to_console is None else to_console
    max_bytes = CFG.LOG_ROTATE_MAX_BYTES if rotate_max_bytes is None else int(rotate_max_bytes)
    backups = CFG.LOG_BACKUP_COUNT if backup_count is None else int(backup_count)
    as_json = CFG.LOG_FORMAT.lower() == "json"

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8", delay=True)
    handlers = [_prepare_handler(file_handler, as_json, CFG.LOG_FILE_RATE_LIMIT_SECONDS)]
    if to_console:
        handlers.append(_prepare_handler(logging.StreamHandler(), as_json, CFG.LOG_RATE_LIMIT_SECONDS))

    logging.basicConfig(level=lvl, handlers=handlers, force=force)
    root = get_logger()
    root.trace(
        "Logging configured: level=%s file=%s format=%s console=%s rotate=%s backup=%s",
        logging.getLevelName(lvl), log_path, "json" if as_json else "plain", to_console, max_bytes, backups,
    )
    return root


# =========================
# 2) Subsystem debug channels
# =========================

def enable_debug_channel(channel: str) -> logging.Logger:
    """Lower the logger behind a debug flag (netdbg, bchdbg, ...) to DEBUG."""
    try:
        name = CFG.DEBUG_CHANNELS[channel]
    except KeyError:
        raise ValueError(f"unknown debug channel: {channel!r}") from None
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    return logger


def debug_channel_enabled(channel: str) -> bool:
    name = CFG.DEBUG_CHANNELS.get(channel)
    if not name:
        return False
    return logging.getLogger(name).level == logging.DEBUG
