"""Helpers for working with the bundled ECB feed snapshot."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = ["DEFAULT_SNAPSHOT_PATH", "bundled_snapshot_path"]

# Resolved relative to this file so the snapshot is found from site-packages
# regardless of the working directory.
DEFAULT_SNAPSHOT_PATH: Final[Path] = Path(__file__).resolve().with_name("eurofxref-daily.xml")


def bundled_snapshot_path() -> Path:
    """Return the absolute path to the packaged ``eurofxref-daily.xml`` file."""

    return DEFAULT_SNAPSHOT_PATH
