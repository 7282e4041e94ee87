# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of BtcDaemon — see LICENSE
# Refs: see REFERENCES.md

'''
=============================================================================
 ------------------ BOOTSTRAP DEFAULTS - READ BEFORE EDITING ----------------
=============================================================================

Values below are the built-in defaults used before any settings file or
command-line override is applied.

  1) APPLICATION
   - APP_NAME / APP_AUTHOR feed appdirs when resolving the default home
   - HOME_ENV_VAR lets packagers relocate the home without a flag

  2) CONFIGURATION FILE
   - SETTINGS_BASENAME, SETTINGS_EXT, TESTNET_SUBDIR

  3) NETWORK PRESETS (livenet / testnet)
   - *_PORT, *_RPC_PORT, *_MAGIC, *_ADDRESS_VERSION, *_SEEDS
   Changing magic or address version isolates the node from its network.

  4) LOGGING
   - LOG_* profile and DEBUG_CHANNELS

=============================================================================
'''

import os


# =============================================================================
# 1. APPLICATION
# =============================================================================
APP_NAME     = "BtcDaemon"  # display name used for user data directories
APP_AUTHOR   = "TsarStudio"  # vendor string passed into platform dir helpers
HOME_ENV_VAR = "BTCDAEMON_HOME"  # env override for the default home directory


# =============================================================================
# 2. CONFIGURATION FILE
# =============================================================================
SETTINGS_BASENAME = "settings"  # config file name inside the home directory
SETTINGS_EXT      = ".py"  # the loader evaluates python source
TESTNET_SUBDIR    = "testnet"  # appended to the default home for --testnet
EXAMPLE_SETTINGS  = "settings.example.py"  # template shipped next to the bootstrap code
DEFAULT_DATADIR   = "."  # data directory, relative to home dir


# =============================================================================
# 3. NETWORK PRESETS
# =============================================================================
PORT_MIN = 0
PORT_MAX = 65535

# ---- LIVENET ----
LIVENET_PORT            = 8333  # P2P listen port on the main network
LIVENET_RPC_PORT        = 8432  # JSON-RPC listen port on the main network
LIVENET_MAGIC           = "f9beb4d9"  # message start bytes (hex)
LIVENET_ADDRESS_VERSION = 0x00  # base58 pubkey-hash version byte
LIVENET_SEEDS = (
    "seed.bitcoin.sipa.be",
    "dnsseed.bluematt.me",
    "dnsseed.bitcoin.dashjr.org",
)  # DNS seeds queried when no peers are known

# ---- TESTNET ----
TESTNET_PORT            = 18333
TESTNET_RPC_PORT        = 18432
TESTNET_MAGIC           = "0b110907"
TESTNET_ADDRESS_VERSION = 0x6f
TESTNET_SEEDS = (
    "testnet-seed.bitcoin.jonasschnelli.ch",
    "seed.tbtc.petertodd.org",
)

# ---- JSON-RPC ----
RPC_DEFAULT_USER = "admin"  # username used when only a password is configured


# =============================================================================
# 4. LOGGING
# =============================================================================
LOG_PATH             = os.path.join("data", "logging", "btcdaemon.log")  # relative to cwd unless overridden
LOG_LEVEL            = "INFO"
LOG_FORMAT           = "plain"  # "plain" or "json"
LOG_TO_CONSOLE       = True
LOG_SHOW_PROCESS     = False
LOG_PROC_PLACEHOLDER = "-"
LOG_RATE_LIMIT_SECONDS      = 0.0
LOG_FILE_RATE_LIMIT_SECONDS = 0.0
LOG_ROTATE_MAX_BYTES        = 5_000_000
LOG_BACKUP_COUNT            = 3

# ---- DEBUG CHANNELS ----
DEBUG_CHANNELS = {
    "netdbg": "btcdaemon.network",  # P2P networking
    "bchdbg": "btcdaemon.chain",  # block chain
    "rpcdbg": "btcdaemon.rpc",  # JSON-RPC
    "scrdbg": "btcdaemon.script",  # script parser / interpreter
}

# ---- LOG PATH NORMALIZATION ----
if str(LOG_FORMAT).lower().strip() == "json":
    LOG_PATH = os.path.splitext(LOG_PATH)[0] + ".jsonl"
