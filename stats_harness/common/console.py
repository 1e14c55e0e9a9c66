"""ANSI colour codes and stderr status helpers."""

from __future__ import annotations

import sys


class C:
    """ANSI colour codes (no-op if not a tty)."""

    _tty = sys.stderr.isatty()
    GREEN = "\033[0;32m" if _tty else ""
    NC = "\033[0m" if _tty else ""


def ok(msg: str) -> None:
    print(f"{C.GREEN}[ OK ]{C.NC} {msg}", file=sys.stderr)
