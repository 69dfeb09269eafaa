"""
Application Layer - Use Cases

This package contains the commands executed against a RateService.
No direct I/O dependencies - uses adapters through interfaces.
"""

from xconv.application.commands import Command, ConvertCommand, ListRatesCommand, convert

__all__ = [
    "Command",
    "ConvertCommand",
    "ListRatesCommand",
    "convert",
]
