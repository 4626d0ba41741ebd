"""Locate notifyctl.toml.

``NOTIFYCTL_CONFIG`` wins when set, even if it points at a missing file
(then no file is used). Otherwise the search starts in the working
directory and climbs to the filesystem root, so a project-level
notifyctl.toml applies from any subdirectory. ``--config`` bypasses this
module entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "notifyctl.toml"
CONFIG_ENV_VAR = "NOTIFYCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the notifyctl.toml that applies from *start*, or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
