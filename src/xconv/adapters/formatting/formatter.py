"""
Output Formatter - Text Formatting and Presentation

This module renders conversion results and rate listings as plain text
for the command line. Numbers are printed in their shortest round-trip
form; no currency-specific rounding is applied.

Files that USE this module:
- xconv.application.commands (commands render their results)
- tests.test_formatter (unit tests)

Files that this module USES:
- xconv.domain.models (Conversion, ExchangeRateSet)
"""
from __future__ import annotations

from xconv.domain.models import Conversion, ExchangeRateSet


def format_conversion(conversion: Conversion) -> str:
    """
    Format a single conversion.

    Returns:
        "<converted_amount> <rate>", e.g. "40.01 4.001"
    """
    return f"{conversion.converted} {conversion.rate}"


def rate_lines(rates: ExchangeRateSet) -> list[str]:
    """
    Format every rate as "<CODE> = <rate>", sorted by code.

    Duplicate codes are collapsed, keeping the first rate.
    """
    return [f"{code} = {rate}" for code, rate in sorted(rates.as_dict().items())]


def format_rate_listing(rates: ExchangeRateSet) -> str:
    """
    Format a full rate listing with a title line.

    Returns:
        "Exchange rates for USD\\nEUR = 0.9\\nPLN = 4.1"
    """
    return "\n".join([f"Exchange rates for {rates.base}", *rate_lines(rates)])
