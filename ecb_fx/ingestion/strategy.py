"""Abstractions for pluggable rate sources."""

from __future__ import annotations

from typing import Protocol

from ecb_fx.ingestion.models import FeedContent


class RateSource(Protocol):
    """Contract for retrieving raw ECB feed content.

    Implementations perform a single attempt per call and return the feed text
    wrapped in :class:`FeedContent`.
    """

    def fetch(self) -> FeedContent:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateSource"]
