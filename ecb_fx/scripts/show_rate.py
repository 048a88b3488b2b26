"""Print ECB reference exchange rates for a base/target currency pair."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from ecb_fx import EcbFx, FeedSettings
from ecb_fx.exceptions import BaseUnavailableError, NoDataAvailableError
from ecb_fx.ingestion.ecb_remote import DEFAULT_TIMEOUT
from ecb_fx.ingestion.models import UNAVAILABLE, RateTable
from ecb_fx.utils.ecb import ECB_DAILY_FEED_URL, SUPPORTED_CURRENCIES
from ecb_fx.utils.logger import get_logger, set_log_level

LOGGER = get_logger(__name__)

NOT_AVAILABLE_MESSAGE = "Currency not available in ECB feed."
NO_DATA_MESSAGE = "Could not fetch exchange rate."

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base", default="USD", choices=SUPPORTED_CURRENCIES)
    parser.add_argument("--target", default="EUR", choices=SUPPORTED_CURRENCIES)
    parser.add_argument(
        "--amount",
        type=float,
        default=1.0,
        help="Amount of the base currency to convert",
    )
    parser.add_argument("--url", dest="feed_url", default=ECB_DAILY_FEED_URL)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    parser.add_argument(
        "--snapshot",
        dest="snapshot_path",
        default=None,
        help="Alternative feed snapshot used when the remote feed fails",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the full cross-rate table for --base instead of a single pair",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every acquisition state transition",
    )
    return parser.parse_args(argv)


def _format_value(value: object) -> str:
    return "N/A" if value is UNAVAILABLE else f"{value:.6f}"


def _print_table(table: RateTable) -> None:
    print(f"1 {table.base} equals ({table.rate_date or 'undated'}):")
    for code, value in table.rounded().items():
        print(f"  {code} {_format_value(value)}")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        set_log_level("DEBUG")
    overrides: dict[str, object] = {"feed_url": args.feed_url, "timeout": args.timeout}
    if args.snapshot_path:
        overrides["snapshot_path"] = args.snapshot_path
    fx = EcbFx(FeedSettings(**overrides))  # type: ignore[arg-type]

    if not args.table and args.base == args.target:
        print(f"{args.amount:g} {args.base} = {args.amount:.6f} {args.target}")
        return 0

    try:
        table = fx.rate_table(args.base)
    except NoDataAvailableError as exc:
        LOGGER.error("%s", exc)
        print(NO_DATA_MESSAGE, file=sys.stderr)
        return 2
    except BaseUnavailableError:
        print(NOT_AVAILABLE_MESSAGE, file=sys.stderr)
        return 1

    if args.table:
        _print_table(table)
    else:
        rate = table.rate(args.target)
        if rate is UNAVAILABLE:
            print(NOT_AVAILABLE_MESSAGE, file=sys.stderr)
            return 1
        print(f"{args.amount:g} {args.base} = {args.amount * rate:.6f} {args.target}")

    provenance = table.provenance
    if provenance is not None:
        line = f"Source: {provenance.source.value}"
        if provenance.reason:
            line += f" ({provenance.reason})"
        print(line)
        for warning in provenance.warnings:
            print(f"Warning: {warning}")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
