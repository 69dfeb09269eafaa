"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from xconv.shared.logging_conf import setup_logging
from xconv.shared.validators import parse_amount, validate_api_key

__all__ = [
    "setup_logging",
    "parse_amount",
    "validate_api_key",
]
