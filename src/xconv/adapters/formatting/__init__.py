"""
Formatting Adapters - Output Formatting

This package contains text formatting for command-line output.
"""

from xconv.adapters.formatting.formatter import (
    format_conversion,
    format_rate_listing,
    rate_lines,
)

__all__ = [
    "format_conversion",
    "format_rate_listing",
    "rate_lines",
]
