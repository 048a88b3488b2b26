"""ECB-specific constants and currency checks used across the package."""

from __future__ import annotations

from typing import Final

from ecb_fx.exceptions import UnsupportedCurrencyError

ECB_DAILY_FEED_URL: Final[str] = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"
FEED_BASE_CURRENCY: Final[str] = "EUR"
SUPPORTED_CURRENCIES: Final[tuple[str, ...]] = (
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "AUD",
    "CAD",
    "CHF",
    "CNY",
    "INR",
)


def is_supported_currency(code: object) -> bool:
    """Return True when ``code`` is one of :data:`SUPPORTED_CURRENCIES` (case sensitive)."""

    return isinstance(code, str) and code in SUPPORTED_CURRENCIES


def enforce_supported_currency(*codes: str) -> None:
    """Raise :class:`UnsupportedCurrencyError` for the first code outside the supported set."""

    for code in codes:
        if not is_supported_currency(code):
            raise UnsupportedCurrencyError(code)


__all__ = [
    "ECB_DAILY_FEED_URL",
    "FEED_BASE_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "enforce_supported_currency",
    "is_supported_currency",
]
