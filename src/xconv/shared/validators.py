"""
Input Validation Utilities

This module provides validation functions for configuration and
command-line input: API keys and conversion amounts.

Files that USE this module:
- xconv.app (uses validate_api_key on the resolved API key)
- xconv.app (uses parse_amount for the AMOUNT argument)

Files that this module USES:
- None (pure utility functions)
"""
import math
from typing import Optional


def validate_api_key(api_key: str, min_length: int = 10) -> bool:
    """
    Validate API key format.

    Args:
        api_key: API key to validate
        min_length: Minimum length requirement

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return len(api_key) >= min_length and not any(c.isspace() for c in api_key)


def parse_amount(value: str) -> Optional[float]:
    """
    Parse an amount to convert.

    Args:
        value: String value to parse (e.g., '10', '12.5')

    Returns:
        Amount as float, or None if it is not a finite number
    """
    if not value:
        return None

    try:
        amount = float(value)
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None
