# BtcDaemon settings
#
# This file is python. It runs with `cfg` (the default Settings, already
# pointing at your home directory) and `Settings` in scope. Edit `cfg` in
# place, or bind a new object to `settings` to replace the defaults.
#
# Command-line flags are applied after this file, so they always win.

# ---- Network ----
# cfg.set_testnet_defaults()          # same as --testnet
# cfg.network.port = 8333             # --port
# cfg.network.no_listen = False       # --nolisten
# cfg.network.initial_peers = []      # --addnode
# cfg.network.force_peers = []        # --forcenode
# cfg.network.connect = None          # --connect, a host or a list of hosts

# ---- JSON-RPC ----
# Uncomment to enable the JSON-RPC server.
# cfg.jsonrpc.enable = True
# cfg.jsonrpc.username = "admin"      # --rpcuser
# cfg.jsonrpc.password = ""           # --rpcpassword
# cfg.jsonrpc.port = 8432             # --rpcport

# ---- Storage ----
# cfg.datadir = "."                   # --datadir, relative to the home dir

# ---- Verification ----
# cfg.verify = True                   # --noverify turns this off
# cfg.verify_scripts = True           # --noverifyscripts turns this off

# ---- Mods ----
# cfg.mods = "explorer,notifier"      # --mods, comma-separated

# ---- Debug output ----
# cfg.log_levels["netdbg"] = 1        # --netdbg
