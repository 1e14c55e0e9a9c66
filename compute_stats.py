#!/usr/bin/env python3
"""
Decimal statistics harness
==========================
Thin entry-point. All logic lives in stats_harness.

Usage:
  python3 compute_stats.py samples.csv
  python3 compute_stats.py samples.csv -o result.json
"""

import sys

from stats_harness.driver.cli import main

if __name__ == "__main__":
    sys.exit(main())
