"""Exception hierarchy raised by the ecb_fx pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ecb_fx.ingestion.fallback import AcquisitionState
    from ecb_fx.ingestion.models import Provenance


class EcbFxError(Exception):
    """Base class for every error raised by :mod:`ecb_fx`."""


class FetchError(EcbFxError):
    """The remote feed could not be retrieved.

    Either the server answered with a non-success HTTP status (``status_code``
    and ``reason`` are populated) or the exchange never completed
    (``transport`` is True).
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        reason: str | None = None,
        transport: bool = False,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.transport = transport

    @property
    def detail(self) -> str:
        if self.transport:
            return f"transport error ({self})"
        status = f"HTTP {self.status_code}" if self.status_code is not None else "HTTP error"
        return f"{status} {self.reason}".strip() if self.reason else status


class FeedParseError(EcbFxError):
    """Feed content passed structural validation but could not be decoded."""


class NoDataAvailableError(EcbFxError):
    """Neither the remote feed nor the bundled snapshot produced usable rates."""

    def __init__(
        self,
        message: str,
        *,
        provenance: "Provenance | None" = None,
        states: "tuple[AcquisitionState, ...]" = (),
    ) -> None:
        super().__init__(message)
        self.provenance = provenance
        self.states = states


class UnsupportedCurrencyError(EcbFxError, ValueError):
    """The currency code is not part of the supported set."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Unsupported currency code: {code!r}")
        self.code = code


class BaseUnavailableError(EcbFxError, LookupError):
    """The chosen base currency has no usable rate in the feed."""

    def __init__(self, base: str) -> None:
        super().__init__(f"Currency not available in ECB feed: {base}")
        self.base = base


__all__ = [
    "BaseUnavailableError",
    "EcbFxError",
    "FeedParseError",
    "FetchError",
    "NoDataAvailableError",
    "UnsupportedCurrencyError",
]
