"""Shared constants for the statistics harness."""

import os
from decimal import Decimal

# ── Decimal arithmetic ───────────────────────────────────────────────────────
DECIMAL_PRECISION = 28              # significant digits for every computation
SQRT_TOLERANCE = Decimal("0.000001")

# ── Histogram classes ────────────────────────────────────────────────────────
BUCKET_COUNT = 10
BUCKET_WIDTH = 10
SAMPLE_MIN = Decimal(0)                           # inclusive
SAMPLE_MAX = Decimal(BUCKET_COUNT * BUCKET_WIDTH)  # exclusive

# ── Input / output ───────────────────────────────────────────────────────────
CSV_DELIMITER = ","
USAGE_MESSAGE = (
    "Please enter full path of a one-line CSV file containing numeric only "
    ">=0 values <100"
)
ABORT_MESSAGE = "Operation aborted with the following error:"

# Logging
LOG_LEVEL = os.environ.get("STATS_LOG_LEVEL", "WARNING").upper()
