"""Read the ECB feed snapshot bundled with the package."""

from __future__ import annotations

from pathlib import Path

from ecb_fx.ingestion.models import FeedContent
from ecb_fx.snapshot import DEFAULT_SNAPSHOT_PATH
from ecb_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)


def load_local(path: str | Path | None = None) -> FeedContent:
    """Return the snapshot content.

    Never raises: an unreadable file is logged and reported as empty content,
    which downstream validation rejects.
    """

    snapshot_path = Path(path) if path else DEFAULT_SNAPSHOT_PATH
    try:
        text = snapshot_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Unable to read ECB snapshot %s: %s", snapshot_path, exc)
        text = ""
    return FeedContent(text=text, origin=str(snapshot_path), content_type="application/xml")


class LocalSnapshotSource:
    """Rate source backed by a snapshot file on disk."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path else DEFAULT_SNAPSHOT_PATH

    def fetch(self) -> FeedContent:
        return load_local(self.path)


__all__ = ["LocalSnapshotSource", "load_local"]
