"""Public interface for the ecb_fx package."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from ecb_fx.conversion.rate_table import RateTableBuilder
from ecb_fx.exceptions import (
    BaseUnavailableError,
    EcbFxError,
    FeedParseError,
    FetchError,
    NoDataAvailableError,
    UnsupportedCurrencyError,
)
from ecb_fx.ingestion.ecb_remote import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, RemoteFeedSource
from ecb_fx.ingestion.ecb_snapshot import LocalSnapshotSource
from ecb_fx.ingestion.fallback import FallbackOrchestrator
from ecb_fx.ingestion.models import (
    UNAVAILABLE,
    AcquisitionResult,
    Provenance,
    ProvenanceSource,
    RateMapping,
    RateTable,
    RateValue,
)
from ecb_fx.ingestion.strategy import RateSource
from ecb_fx.snapshot import DEFAULT_SNAPSHOT_PATH
from ecb_fx.utils.ecb import ECB_DAILY_FEED_URL, SUPPORTED_CURRENCIES, enforce_supported_currency

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import requests

__all__ = [
    "__version__",
    "BaseUnavailableError",
    "EcbFx",
    "EcbFxError",
    "FeedParseError",
    "FeedSettings",
    "FetchError",
    "NoDataAvailableError",
    "Provenance",
    "ProvenanceSource",
    "RateMapping",
    "RateTable",
    "RateTableBuilder",
    "SUPPORTED_CURRENCIES",
    "UNAVAILABLE",
    "UnsupportedCurrencyError",
]

try:
    __version__ = importlib_metadata.version("ecb-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


@dataclass(slots=True)
class FeedSettings:
    """Where the feed lives and how to reach it."""

    feed_url: str = ECB_DAILY_FEED_URL
    timeout: float | None = DEFAULT_TIMEOUT
    snapshot_path: Path = field(default_factory=lambda: DEFAULT_SNAPSHOT_PATH)
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.feed_url:
            raise ValueError("feed_url must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")
        self.snapshot_path = Path(self.snapshot_path)


class EcbFx:
    """Package facade: acquire ECB rates and derive conversions from them.

    Every call performs a fresh acquisition (remote feed first, bundled
    snapshot on failure); nothing is cached between calls.
    """

    __slots__ = ("settings", "orchestrator", "builder")

    __version__ = __version__

    def __init__(
        self,
        settings: FeedSettings | None = None,
        *,
        session: "requests.Session | None" = None,
        remote: RateSource | None = None,
        local: RateSource | None = None,
    ) -> None:
        """Wire up the acquisition pipeline.

        ``remote``/``local`` replace the default sources entirely, which is how
        tests and alternative hosts plug in their own feeds. ``session`` is only
        used by the default remote source.
        """

        self.settings = settings or FeedSettings()
        self.orchestrator = FallbackOrchestrator(
            remote or RemoteFeedSource.from_settings(self.settings, session=session),
            local or LocalSnapshotSource(self.settings.snapshot_path),
        )
        self.builder = RateTableBuilder()

    def acquire(self) -> AcquisitionResult:
        return self.orchestrator.acquire()

    def rate_table(self, base: str) -> RateTable:
        """Return ``1 base = N units`` for every supported currency."""

        enforce_supported_currency(base)
        result = self.acquire()
        return self.builder.build(result.mapping, base, provenance=result.provenance)

    def rate(self, base: str, target: str) -> RateValue:
        """Return how many ``target`` units one ``base`` unit buys.

        Identical currencies short-circuit to 1 without touching the feed.
        """

        enforce_supported_currency(base, target)
        if base == target:
            return 1.0
        return self.rate_table(base).rate(target)

    def convert(self, amount: float, base: str, target: str) -> RateValue:
        rate = self.rate(base, target)
        if rate is UNAVAILABLE:
            return UNAVAILABLE
        return amount * rate

    def snapshot(self, base: str) -> Dict[str, Any]:
        """Return the rate table as a plain payload including provenance."""

        table = self.rate_table(base)
        provenance = table.provenance
        return {
            "rate_date": table.rate_date,
            "base_currency": table.base,
            "source": provenance.source.value if provenance else None,
            "reason": provenance.reason if provenance else None,
            "warnings": list(provenance.warnings) if provenance else [],
            "rates": dict(table.rates),
        }
