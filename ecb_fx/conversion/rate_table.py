"""Derive ``1 base = N target`` tables from EUR-relative feed rates."""

from __future__ import annotations

import math
from typing import Sequence

from ecb_fx.exceptions import BaseUnavailableError
from ecb_fx.ingestion.models import UNAVAILABLE, Provenance, RateMapping, RateTable, RateValue
from ecb_fx.utils.ecb import SUPPORTED_CURRENCIES, enforce_supported_currency


def _usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value) and value > 0


class RateTableBuilder:
    """Build cross-rate tables for any supported base currency.

    All ECB rates are quoted as ``1 EUR = N units``, so converting ``base`` to
    ``target`` is ``rate[target] / rate[base]``. The base itself is pinned to
    exactly 1, and currencies without a usable feed rate are marked
    :data:`UNAVAILABLE` rather than computed.
    """

    def __init__(self, currencies: Sequence[str] = SUPPORTED_CURRENCIES) -> None:
        enforce_supported_currency(*currencies)
        self.currencies = tuple(currencies)

    def build(
        self,
        mapping: RateMapping,
        base: str,
        *,
        provenance: Provenance | None = None,
    ) -> RateTable:
        enforce_supported_currency(base)
        base_rate = mapping.get(base)
        if not _usable(base_rate):
            raise BaseUnavailableError(base)
        assert base_rate is not None

        rates: dict[str, RateValue] = {}
        for code in self.currencies:
            if code == base:
                rates[code] = 1.0
                continue
            value = mapping.get(code)
            rates[code] = value / base_rate if _usable(value) else UNAVAILABLE
        return RateTable(base=base, rates=rates, rate_date=mapping.rate_date, provenance=provenance)


__all__ = ["RateTableBuilder"]
