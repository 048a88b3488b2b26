from __future__ import annotations

import itertools
import math

import pytest

from ecb_fx.conversion.rate_table import RateTableBuilder
from ecb_fx.exceptions import BaseUnavailableError, UnsupportedCurrencyError
from ecb_fx.ingestion.models import UNAVAILABLE, RateMapping
from ecb_fx.utils.ecb import SUPPORTED_CURRENCIES

FULL_MAPPING = RateMapping(
    {
        "USD": 1.0812,
        "JPY": 168.12,
        "GBP": 0.8543,
        "AUD": 1.6387,
        "CAD": 1.4789,
        "CHF": 0.9801,
        "CNY": 7.8252,
        "INR": 90.1234,
    }
)


def test_scenario_usd_base() -> None:
    mapping = RateMapping({"EUR": 1, "USD": 1.1, "GBP": 0.85})

    table = RateTableBuilder().build(mapping, "USD")

    assert table.rounded() == {
        "USD": 1.0,
        "EUR": 0.909091,
        "GBP": 0.772727,
        "JPY": UNAVAILABLE,
        "AUD": UNAVAILABLE,
        "CAD": UNAVAILABLE,
        "CHF": UNAVAILABLE,
        "CNY": UNAVAILABLE,
        "INR": UNAVAILABLE,
    }
    assert table["JPY"] is UNAVAILABLE
    assert not table.is_available("JPY")


@pytest.mark.parametrize("base", SUPPORTED_CURRENCIES)
def test_base_is_exactly_one(base: str) -> None:
    table = RateTableBuilder().build(FULL_MAPPING, base)

    assert table[base] == 1
    assert table.base == base


def test_cross_rates_round_trip() -> None:
    builder = RateTableBuilder()
    for a, b in itertools.permutations(SUPPORTED_CURRENCIES, 2):
        forward = builder.build(FULL_MAPPING, a)[b]
        backward = builder.build(FULL_MAPPING, b)[a]
        assert forward * backward == pytest.approx(1.0)


def test_missing_base_raises_even_with_good_mapping() -> None:
    mapping = RateMapping({"USD": 1.1, "GBP": 0.85})

    with pytest.raises(BaseUnavailableError) as excinfo:
        RateTableBuilder().build(mapping, "JPY")

    assert excinfo.value.base == "JPY"


def test_nan_base_is_unavailable() -> None:
    mapping = RateMapping({"USD": math.nan, "GBP": 0.85})

    with pytest.raises(BaseUnavailableError):
        RateTableBuilder().build(mapping, "USD")


def test_nan_entry_becomes_unavailable_marker() -> None:
    mapping = RateMapping({"USD": 1.1, "CAD": math.nan, "CHF": 0.0})

    table = RateTableBuilder().build(mapping, "USD")

    assert table["CAD"] is UNAVAILABLE
    assert table["CHF"] is UNAVAILABLE
    assert table["EUR"] == pytest.approx(1 / 1.1)


def test_feed_base_always_available() -> None:
    table = RateTableBuilder().build(RateMapping({}), "EUR")

    assert table["EUR"] == 1.0
    assert all(table[code] is UNAVAILABLE for code in SUPPORTED_CURRENCIES if code != "EUR")


def test_unsupported_codes_are_not_derived() -> None:
    mapping = RateMapping({"USD": 1.1, "SEK": 11.5})

    table = RateTableBuilder().build(mapping, "USD")

    assert "SEK" not in table
    assert table.rate("SEK") is UNAVAILABLE
    assert list(table) == list(SUPPORTED_CURRENCIES)


@pytest.mark.parametrize("base", ["usd", "SEK", ""])
def test_unsupported_base_is_rejected(base: str) -> None:
    with pytest.raises(UnsupportedCurrencyError):
        RateTableBuilder().build(FULL_MAPPING, base)


def test_builder_can_restrict_currencies() -> None:
    table = RateTableBuilder(("USD", "EUR")).build(FULL_MAPPING, "USD")

    assert list(table) == ["USD", "EUR"]


def test_table_carries_feed_date() -> None:
    from datetime import date

    mapping = RateMapping({"USD": 1.1}, rate_date=date(2024, 5, 2))

    assert RateTableBuilder().build(mapping, "USD").rate_date == date(2024, 5, 2)
