"""Locating the project config file.

Order:
1) the explicit path, if it exists
2) ./<filename> (cwd)
3) <user config dir>/<filename>
"""

from __future__ import annotations

from pathlib import Path

from core.config import get_user_config_dir


def config_candidates(path: Path) -> list[Path]:
    return [
        path,
        Path.cwd() / path.name,
        get_user_config_dir() / path.name,
    ]


def find_config_file(path: Path) -> Path | None:
    """Return the first existing candidate for `path`, or None."""

    for candidate in config_candidates(path):
        if candidate.exists() and candidate.is_file():
            return candidate
    return None
