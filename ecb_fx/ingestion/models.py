"""Data models shared across ingestion and conversion modules."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Union

from ecb_fx.utils.ecb import FEED_BASE_CURRENCY

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import pandas as pd
    from ecb_fx.ingestion.fallback import AcquisitionState


class Availability(Enum):
    """Marker for cross rates that cannot be derived from the feed."""

    UNAVAILABLE = "unavailable"

    def __repr__(self) -> str:
        return "UNAVAILABLE"

    def __str__(self) -> str:
        return "N/A"


UNAVAILABLE = Availability.UNAVAILABLE
RateValue = Union[float, Availability]


class ProvenanceSource(str, Enum):
    """Which data source supplied the rates of an acquisition."""

    REMOTE = "remote"
    LOCAL = "local"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class Provenance:
    """Where the rates came from and why the remote feed was abandoned, if it was."""

    source: ProvenanceSource
    reason: str | None = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FeedContent:
    """Raw feed text together with where it was read from."""

    text: str
    origin: str
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class RateMapping:
    """``1 EUR = N units`` for every currency found in a feed.

    The feed base currency is always present with exactly ``1.0``.
    """

    rates: Mapping[str, float]
    rate_date: date | None = None
    base_currency: str = FEED_BASE_CURRENCY

    def __post_init__(self) -> None:
        rates = dict(self.rates)
        seeded = rates.setdefault(self.base_currency, 1.0)
        if seeded != 1.0:
            raise ValueError(
                f"{self.base_currency} is the feed base and must map to 1, got {seeded!r}"
            )
        rates[self.base_currency] = 1.0
        object.__setattr__(self, "rates", MappingProxyType(rates))

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def __getitem__(self, code: str) -> float:
        return self.rates[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def get(self, code: str, default: float | None = None) -> float | None:
        return self.rates.get(code, default)


@dataclass(frozen=True, slots=True)
class AcquisitionResult:
    """Output of a successful acquisition: parsed rates plus provenance."""

    mapping: RateMapping
    provenance: Provenance
    states: tuple["AcquisitionState", ...] = ()


@dataclass(frozen=True, slots=True)
class RateTable:
    """``1 base = N units`` for every supported currency."""

    base: str
    rates: Mapping[str, RateValue]
    rate_date: date | None = None
    provenance: Provenance | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def __getitem__(self, code: str) -> RateValue:
        return self.rates[code]

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def __iter__(self) -> Iterator[str]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def rate(self, target: str) -> RateValue:
        """Return the rate for ``target``; codes outside the table are unavailable."""

        return self.rates.get(target, UNAVAILABLE)

    def is_available(self, code: str) -> bool:
        return self.rate(code) is not UNAVAILABLE

    def rounded(self, places: int = 6) -> dict[str, RateValue]:
        return {
            code: value if value is UNAVAILABLE else round(value, places)
            for code, value in self.rates.items()
        }

    def to_frame(self) -> "pd.DataFrame":
        """Return the table as a DataFrame, unavailable entries as missing values."""

        import pandas as pd

        rows: list[dict[str, Any]] = [
            {
                "currency": code,
                "rate": math.nan if value is UNAVAILABLE else value,
                "available": value is not UNAVAILABLE,
            }
            for code, value in self.rates.items()
        ]
        frame = pd.DataFrame(rows, columns=["currency", "rate", "available"])
        frame.attrs["base_currency"] = self.base
        frame.attrs["rate_date"] = self.rate_date
        return frame


__all__ = [
    "AcquisitionResult",
    "Availability",
    "FeedContent",
    "Provenance",
    "ProvenanceSource",
    "RateMapping",
    "RateTable",
    "RateValue",
    "UNAVAILABLE",
]
