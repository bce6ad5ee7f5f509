"""Utility helpers for JSON output and logging."""

from __future__ import annotations

import json
import sys


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, indent=2) + "\n"


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
