"""
config.py — Bounds, presets, and Flask settings
================================================
Module constants are read by the input layer and the playback engine.
`DefaultConfig` is loaded into the Flask app first; `ALGOVIZ_*`
environment variables override it (see main.create_app).
"""

import secrets

# ---------------------------------------------------------------------------
# Array input bounds
# ---------------------------------------------------------------------------
MIN_ARRAY_SIZE     = 5
MAX_ARRAY_SIZE     = 50
DEFAULT_ARRAY_SIZE = 15
MIN_VALUE          = 1
MAX_VALUE          = 100

# ---------------------------------------------------------------------------
# Graph defaults
# ---------------------------------------------------------------------------
DEFAULT_GRAPH_NODES = 6
MAX_GRAPH_NODES     = 30
EDGE_WEIGHT_RANGE   = (1, 10)

# how many finished traces the in-process run store keeps
MAX_STORED_RUNS     = 64

# ---------------------------------------------------------------------------
# Playback speed (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.3,
    "fast":   0.1,
    "turbo":  0.05,
}
DEFAULT_SPEED = SPEED_PRESETS["medium"]
MIN_SPEED     = 0.05
MAX_SPEED     = 1.0


class DefaultConfig:
    SECRET_KEY = secrets.token_hex(32)
    MAX_STORED_RUNS = MAX_STORED_RUNS
    DEFAULT_ALGORITHM = "bubble-sort"
    HOST = "127.0.0.1"
    PORT = 5000
