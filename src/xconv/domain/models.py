"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currency codes (case-insensitive identifiers)
- Exchange rate sets for a single base currency
- Conversion results

Files that USE this module:
- xconv.adapters.providers.* (rate services build and return domain models)
- xconv.application.commands (commands consume exchange rate sets)
- xconv.adapters.formatting.formatter (renders rate sets)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite checks for rate values
from dataclasses import dataclass  # Decorator for creating data classes
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple  # Type hints


@dataclass(frozen=True, eq=False)
class CurrencyCode:
    """
    Currency identifier such as "USD" or "pln".

    Any string is accepted as a code; whether the provider knows it is
    decided remotely. Equality and hashing ignore case, and the textual
    form is always upper-case.
    """
    code: str

    @classmethod
    def parse(cls, text: str) -> "CurrencyCode":
        """
        Build a CurrencyCode from arbitrary input text.

        Args:
            text: Raw currency code (e.g., 'usd', ' EUR ')

        Returns:
            CurrencyCode wrapping the stripped text

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Currency code must be a string, got {type(text).__name__}")
        return cls(text.strip())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyCode):
            return NotImplemented
        return self.code.upper() == other.code.upper()

    def __hash__(self) -> int:
        return hash(self.code.upper())

    def __str__(self) -> str:
        return self.code.upper()


def _to_rate(value: Any) -> float:
    """
    Validate a raw rate value.

    Args:
        value: Rate as decoded from JSON

    Returns:
        Rate as float

    Raises:
        ValueError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Rate must be a number, got {value!r}")
    rate = float(value)
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(f"Rate must be positive and finite, got {value!r}")
    return rate


@dataclass(frozen=True, eq=False)
class ExchangeRateSet:
    """
    Exchange rates for a single base currency.

    Attributes:
        base: Base (source) currency
        rates: Ordered (target, rate) pairs; rate is units of target per one unit of base

    Lookup is a linear scan with case-insensitive code equality. If a target
    appears more than once, the first pair wins.
    """
    base: CurrencyCode
    rates: Tuple[Tuple[CurrencyCode, float], ...] = ()

    @classmethod
    def from_mapping(cls, base: CurrencyCode, mapping: Mapping[Any, Any]) -> "ExchangeRateSet":
        """
        Build a rate set from a {code: rate} mapping (e.g., decoded JSON).

        Raises:
            ValueError: If a key is not a currency code or a rate is invalid
        """
        pairs = []
        for raw_code, raw_rate in mapping.items():
            try:
                code = CurrencyCode.parse(raw_code)
            except TypeError as e:
                raise ValueError(str(e)) from e
            pairs.append((code, _to_rate(raw_rate)))
        return cls(base=base, rates=tuple(pairs))

    def get_rate(self, target: CurrencyCode) -> Optional[float]:
        """Return the rate for target, or None if absent."""
        for code, rate in self.rates:
            if code == target:
                return rate
        return None

    def as_dict(self) -> Dict[str, float]:
        """Return {CODE: rate} with canonical upper-case codes (first match wins)."""
        out: Dict[str, float] = {}
        for code, rate in self.rates:
            out.setdefault(str(code), rate)
        return out

    def __iter__(self) -> Iterator[Tuple[CurrencyCode, float]]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def __eq__(self, other: object) -> bool:
        # Pair order is irrelevant to equality
        if not isinstance(other, ExchangeRateSet):
            return NotImplemented
        return self.base == other.base and self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash((self.base, frozenset(self.as_dict().items())))


@dataclass(frozen=True)
class Conversion:
    """
    Result of converting an amount from one currency into another.

    Attributes:
        source: Source currency
        target: Target currency
        amount: Amount in source currency
        rate: Units of target per one unit of source
    """
    source: CurrencyCode
    target: CurrencyCode
    amount: float
    rate: float

    @property
    def converted(self) -> float:
        return self.amount * self.rate
