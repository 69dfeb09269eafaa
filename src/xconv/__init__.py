# src/xconv/__init__.py
"""
XConv - Currency Converter

A command-line currency converter that queries a remote exchange-rate
provider (freecurrencyapi.com compatible) and optionally shields it behind
a Redis or file cache.
"""

__version__ = "1.0.0"
__author__ = "Masih Sadri"
