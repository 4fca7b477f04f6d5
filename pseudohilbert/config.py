"""Constants, tables, and defaults for pseudo-Hilbert curve generation."""

import os

# ── Paths ──────────────────────────────────────────────────────────────
OUTPUT_DIR = os.environ.get("PSEUDOHILBERT_OUTPUT_DIR", ".")

# ── Curve tables ──────────────────────────────────────────────────────
# y grows downward: (0, 0) is top-left, (1, 1) is bottom-right.
# The order-1 curve, upside-down compared to the usual drawing.
BASE_PATTERN = (
    (0.25, 0.75),  # bottom left
    (0.25, 0.25),  # top left
    (0.75, 0.25),  # top right
    (0.75, 0.75),  # bottom right
)

# Scale origins for each quadrant copy; same order as BASE_PATTERN.
QUADRANT_ORIGINS = (
    (0.0, 1.0),  # bottom left
    (0.0, 0.0),  # top left
    (1.0, 0.0),  # top right
    (1.0, 1.0),  # bottom right
)

CENTER = (0.5, 0.5)
QUADRANT_SCALE = 0.5

# ── Driver defaults ───────────────────────────────────────────────────
MIN_ORDER = 1
MAX_ORDER = 15
DEFAULT_WORKERS = 1  # 1 = sequential reference path
CHECK_MAX_ORDER = 8  # `check` keeps to orders that fit comfortably in memory

# ── Serialization ─────────────────────────────────────────────────────
FILENAME_TEMPLATE = "o{order:02d}_hilbert"
TEXT_SUFFIX = ".txt"
WRITE_CHUNK = 65536   # points per write() call
TEXT_PRECISION = 15   # fractional digits in text mode

# ── Analysis ──────────────────────────────────────────────────────────
TOLERANCE = 1e-9
