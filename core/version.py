# -*- coding: utf-8 -*-
"""Project version helpers."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import metadata
from pathlib import Path

DIST_NAME = "vanille-crafting"


@lru_cache(maxsize=1)
def project_version() -> str:
    """conf/version.json first (source checkout), then installed metadata."""
    path = Path(__file__).resolve().parents[1] / "conf" / "version.json"
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except ValueError:
            data = {}
        ver = data.get("project_version") if isinstance(data, dict) else None
        if isinstance(ver, str) and ver.strip():
            return ver.strip()
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"
