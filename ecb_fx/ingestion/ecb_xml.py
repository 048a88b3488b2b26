"""Validate and parse the ECB ``eurofxref`` XML feed.

The feed nests ``Cube`` elements three levels deep::

    <Cube>
      <Cube time='2025-06-13'>
        <Cube currency='USD' rate='1.1512'/>
        ...

Only the innermost elements carry ``currency``/``rate``; EUR itself is never
listed because every rate is expressed against it.
"""

from __future__ import annotations

import math
import re
import warnings
from datetime import date
from typing import Union

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from ecb_fx.exceptions import FeedParseError
from ecb_fx.ingestion.models import FeedContent, RateMapping
from ecb_fx.utils.ecb import FEED_BASE_CURRENCY
from ecb_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

FeedInput = Union[str, bytes, FeedContent]

REQUIRED_MARKERS: tuple[str, ...] = ("<Cube", "currency=", "rate=", "time=")

# Leading decimal literal, as accepted by JavaScript's ``parseFloat``.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"[+-]?Infinity")


def _as_text(content: FeedInput) -> str:
    if isinstance(content, FeedContent):
        return content.text
    if isinstance(content, bytes):
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FeedParseError(f"Feed content is not valid UTF-8: {exc}") from exc
    return content


def is_valid_feed(content: FeedInput) -> bool:
    """Cheap structural check: every expected marker literally appears in ``content``.

    This does not parse anything, so marker-bearing content with broken rate
    values is accepted and left to the parser.
    """

    if isinstance(content, FeedContent):
        text = content.text
    elif isinstance(content, bytes):
        text = content.decode("utf-8", errors="replace")
    else:
        text = content
    if not text:
        return False
    return all(marker in text for marker in REQUIRED_MARKERS)


def parse_rate(value: str) -> float:
    """Parse ``value`` the way ``parseFloat`` does, returning NaN when nothing numeric leads."""

    stripped = value.strip()
    match = _FLOAT_PREFIX.match(stripped)
    if match:
        return float(match.group(0))
    infinity = _INFINITY_PREFIX.match(stripped)
    if infinity:
        return -math.inf if infinity.group(0).startswith("-") else math.inf
    return math.nan


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        LOGGER.warning("Ignoring invalid feed date %r", value)
        return None


class EcbXmlParser:
    """Convert ECB feed documents into a :class:`RateMapping`."""

    def __init__(self, *, base_currency: str = FEED_BASE_CURRENCY) -> None:
        self.base_currency = base_currency

    def parse(self, content: FeedInput) -> RateMapping:
        text = _as_text(content)
        # html.parser lower-cases tag and attribute names.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            soup = BeautifulSoup(text, "html.parser")

        rates: dict[str, float] = {self.base_currency: 1.0}
        for cube in soup.find_all("cube", attrs={"currency": True, "rate": True}):
            currency = cube.get("currency")
            rate = cube.get("rate")
            if not currency or not rate:
                continue
            if currency == self.base_currency:
                LOGGER.warning("Ignoring explicit %s record in feed", currency)
                continue
            parsed = parse_rate(rate)
            if math.isnan(parsed):
                LOGGER.warning("Rate %r for %s is not numeric", rate, currency)
            rates[currency] = parsed

        dated = soup.find("cube", attrs={"time": True})
        rate_date = _parse_date(dated.get("time") if dated else None)
        LOGGER.debug("Parsed %s rates dated %s", len(rates) - 1, rate_date)
        return RateMapping(rates, rate_date=rate_date, base_currency=self.base_currency)


__all__ = ["EcbXmlParser", "REQUIRED_MARKERS", "is_valid_feed", "parse_rate"]
