from __future__ import annotations

import os

BOARD_ROWS = int(os.getenv("GRIDRUN_BOARD_ROWS", "8"))
BOARD_COLS = int(os.getenv("GRIDRUN_BOARD_COLS", "8"))
GOLD_PER_NODE = int(os.getenv("GRIDRUN_GOLD_PER_NODE", "10"))
MAX_SESSIONS = int(os.getenv("GRIDRUN_MAX_SESSIONS", "50"))
EVICT_ON_GET = os.getenv("GRIDRUN_EVICT_ON_GET", "true").lower() != "false"
LOG_LEVEL = os.getenv("GRIDRUN_LOG_LEVEL", "INFO").upper()
