"""Cross-rate derivation on top of parsed ECB rates."""

from ecb_fx.conversion.rate_table import RateTableBuilder

__all__ = ["RateTableBuilder"]
