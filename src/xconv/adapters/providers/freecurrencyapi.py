"""
FreeCurrencyAPI Provider for Exchange Rates

This module implements the freecurrencyapi.com "latest" endpoint as a
RateService. It builds request URLs, calls the injected transport client,
parses success and validation-error bodies, and classifies every failure
into the domain error taxonomy.

Files that USE this module:
- xconv.app (composition root creates the provider)
- tests.test_providers (unit tests)

Files that this module USES:
- xconv.adapters.providers.base (RateService interface)
- xconv.adapters.http (TransportClient and transport errors)
- xconv.domain (CurrencyCode, ExchangeRateSet, domain errors)
"""
from __future__ import annotations

import logging
import urllib.parse
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, Field, ValidationError

from xconv.adapters.http.base import TransportClient
from xconv.adapters.http.errors import TransportError, ValidationRejectedError
from xconv.adapters.providers.base import RateService
from xconv.domain.errors import (
    InvalidSourceCurrencyError,
    InvalidTargetCurrencyError,
    RateServiceUnavailableError,
)
from xconv.domain.models import CurrencyCode, ExchangeRateSet

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.freecurrencyapi.com/v1/latest"


class RatesEnvelope(BaseModel):
    """Success body: {"data": {"PLN": 4.001, ...}}"""
    data: Dict[str, Any]


class ValidationErrors(BaseModel):
    base_currency: List[str] = Field(default_factory=list)
    currencies: List[str] = Field(default_factory=list)


class ValidationEnvelope(BaseModel):
    """HTTP 422 body: {"message": ..., "errors": {...}, "info": ...}"""
    message: str = ""
    errors: ValidationErrors = Field(default_factory=ValidationErrors)
    info: str = ""


class FreeCurrencyApiRateService(RateService):
    def __init__(self, api_url: str, api_key: str, client: TransportClient):
        """
        Initialize the provider adapter.

        Args:
            api_url: Endpoint URL (e.g., DEFAULT_API_URL)
            api_key: freecurrencyapi.com API key
            client: Transport client used for the GET requests

        Raises:
            ValueError: If api_url or api_key is empty
        """
        if not api_url:
            raise ValueError("API URL is not configured.")
        if not api_key:
            raise ValueError("API key is not configured.")
        self.api_url = api_url
        self.api_key = api_key
        self.client = client

    def build_url(self, source: CurrencyCode, targets: Sequence[CurrencyCode] = ()) -> str:
        """
        Build the request URL for a base currency and optional target list.

        Returns:
            <api_url>?apikey=<key>&base_currency=<SRC>[&currencies=<T1,T2,...>]
        """
        params = {"apikey": self.api_key, "base_currency": str(source)}
        if targets:
            params["currencies"] = ",".join(str(t) for t in targets)
        sep = "&" if "?" in self.api_url else "?"
        return f"{self.api_url}{sep}{urllib.parse.urlencode(params, safe=',')}"

    async def get_rate(self, source: CurrencyCode, target: CurrencyCode) -> float:
        rates = await self._fetch(source, [target])
        rate = rates.get_rate(target)
        if rate is None:
            # Provider answered without the requested currency
            log.warning("Provider response for %s lacks target %s", source, target)
            raise InvalidTargetCurrencyError(f"Rate for {target} not present in provider response")
        return rate

    async def get_rates(self, source: CurrencyCode) -> ExchangeRateSet:
        return await self._fetch(source, [])

    async def get_rates_for(self, source: CurrencyCode, targets: Sequence[CurrencyCode]) -> ExchangeRateSet:
        """Fetch rates for a subset of targets in a single request."""
        return await self._fetch(source, targets)

    async def _fetch(self, source: CurrencyCode, targets: Sequence[CurrencyCode]) -> ExchangeRateSet:
        url = self.build_url(source, targets)
        log.debug("Requesting rates: %s", url.replace(self.api_key, "***"))
        try:
            body = await self.client.get(url)
        except ValidationRejectedError as e:
            raise self._classify_validation_error(e.body) from e
        except TransportError as e:
            log.warning("Provider request failed: %s", e)
            raise RateServiceUnavailableError(str(e)) from e
        return self._parse_rates(source, body)

    @staticmethod
    def _parse_rates(source: CurrencyCode, body: str) -> ExchangeRateSet:
        """
        Parse a success body into an ExchangeRateSet.

        Raises:
            RateServiceUnavailableError: If the body or any entry is malformed
        """
        try:
            envelope = RatesEnvelope.model_validate_json(body)
        except ValidationError as e:
            log.error("Provider returned an unexpected body: %s", body[:200])
            raise RateServiceUnavailableError(f"Malformed provider response: {e}") from e
        try:
            return ExchangeRateSet.from_mapping(source, envelope.data)
        except ValueError as e:
            log.error("Provider returned an invalid rate entry: %s", e)
            raise RateServiceUnavailableError(f"Malformed provider response: {e}") from e

    @staticmethod
    def _classify_validation_error(body: str) -> Exception:
        """
        Map an HTTP 422 body to a domain error.

        Source-currency errors take priority when both groups are reported.
        """
        try:
            envelope = ValidationEnvelope.model_validate_json(body)
        except ValidationError as e:
            log.warning("Unparseable validation error body: %s", body[:200])
            return RateServiceUnavailableError(f"Unparseable validation error: {e}")

        if envelope.errors.base_currency:
            log.info("Provider rejected base currency: %s", envelope.errors.base_currency)
            return InvalidSourceCurrencyError()
        if envelope.errors.currencies:
            log.info("Provider rejected target currencies: %s", envelope.errors.currencies)
            return InvalidTargetCurrencyError()
        return RateServiceUnavailableError(body)
