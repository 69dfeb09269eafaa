"""
Application Entry Point - CLI and Service Composition

This module serves as the composition root for the xconv command-line tool.
It parses arguments, loads settings, configures logging, wires the rate
service (optionally behind a Redis or file cache) and prints the result.

Usage:
    xconv [--api-key KEY] [--no-cache] [-v] SOURCE [TARGET [AMOUNT]]

Exit codes:
    0 - success
    1 - the rate service failed (invalid currency, provider unavailable)
    2 - usage or configuration error (missing API key, bad arguments)

Files that USE this module:
- pyproject.toml (console script "xconv")
- xconv.__main__ (python -m xconv)
- tests.test_app (CLI tests)

Files that this module USES:
- xconv.config (Settings)
- xconv.shared (setup_logging, parse_amount, validate_api_key)
- xconv.adapters.http (HttpxTransportClient)
- xconv.adapters.cache (FileCacheStore, RedisCacheStore)
- xconv.adapters.providers (FreeCurrencyApiRateService, CachedRateService)
- xconv.application.commands (ListRatesCommand, ConvertCommand)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command-line argument parsing
import asyncio  # Event loop for the async rate services
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import List, Optional, Sequence

from pydantic import ValidationError  # Raised by Settings on invalid environment

from xconv import __version__
from xconv.adapters.cache.base import CacheStore
from xconv.adapters.cache.file_store import FileCacheStore
from xconv.adapters.cache.redis_store import RedisCacheStore
from xconv.adapters.http.httpx_client import HttpxTransportClient
from xconv.adapters.providers.base import RateService
from xconv.adapters.providers.cached import CachedRateService
from xconv.adapters.providers.freecurrencyapi import FreeCurrencyApiRateService
from xconv.application.commands import Command, ConvertCommand, ListRatesCommand
from xconv.config import Settings
from xconv.domain.errors import RateServiceError
from xconv.domain.models import CurrencyCode
from xconv.shared.logging_conf import setup_logging
from xconv.shared.validators import parse_amount, validate_api_key

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SERVICE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _amount(value: str) -> float:
    amount = parse_amount(value)
    if amount is None:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xconv",
        description="Convert currency amounts using live exchange rates.",
    )
    parser.add_argument("source", help="Source currency code")
    parser.add_argument("target", nargs="?", help="Target currency code (omit to list all rates)")
    parser.add_argument("amount", nargs="?", type=_amount, default=1.0,
                        help="Amount which will be converted (default: 1)")
    parser.add_argument("--api-key", dest="api_key",
                        help="API key used for authentication (default: $CURRENCY_API_KEY)")
    parser.add_argument("--no-cache", action="store_true", help="Always query the provider")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more details to stderr (-v info, -vv debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_command(args: argparse.Namespace) -> Command:
    """Map parsed arguments onto a command."""
    source = CurrencyCode.parse(args.source)
    if args.target is None:
        return ListRatesCommand(source=source)
    return ConvertCommand(source=source, target=CurrencyCode.parse(args.target), amount=args.amount)


async def build_cache_store(settings: Settings) -> Optional[CacheStore]:
    """
    Pick a cache backend from settings.

    Redis is preferred when REDIS_URL is set and reachable; otherwise the
    file cache is used when XCONV_CACHE_FILE is set. Returns None for a
    cacheless setup.
    """
    if settings.redis_url:
        try:
            store = RedisCacheStore.from_url(settings.redis_url, timeout=settings.http_timeout_seconds)
        except ValueError as e:
            log.warning("Invalid REDIS_URL, not using Redis: %s", e)
        else:
            if await store.ping():
                log.info("Using Redis as cache service")
                return store
            await store.aclose()

    if settings.cache_file:
        log.info("Using file cache at %s", settings.cache_file)
        return FileCacheStore(settings.cache_file)

    log.info("Using cacheless service")
    return None


async def run_command(command: Command, settings: Settings, api_key: str, use_cache: bool = True) -> str:
    """
    Wire the rate service and execute a command against it.

    Raises:
        RateServiceError: Propagated from the rate service
    """
    async with HttpxTransportClient(timeout=settings.http_timeout_seconds) as client:
        service: RateService = FreeCurrencyApiRateService(settings.api_url, api_key, client)
        cache = await build_cache_store(settings) if use_cache else None
        if cache is not None:
            service = CachedRateService(cache, service)
        try:
            return await command.execute(service)
        finally:
            if isinstance(cache, RedisCacheStore):
                await cache.aclose()


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI and return the process exit code.

    Argument errors raise SystemExit(2) from argparse.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    level_name = {0: settings.log_level, 1: "INFO"}.get(args.verbose, "DEBUG")
    setup_logging(
        level=getattr(logging, level_name),
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        to_stream=settings.log_stdout,
    )

    api_key = (args.api_key or settings.api_key or "").strip()
    if not api_key:
        print("You have to provide API key (--api-key or CURRENCY_API_KEY)", file=sys.stderr)
        return EXIT_USAGE_ERROR
    if not validate_api_key(api_key):
        print("Invalid API key format", file=sys.stderr)
        return EXIT_USAGE_ERROR

    command = build_command(args)
    try:
        output = asyncio.run(run_command(command, settings, api_key, use_cache=not args.no_cache))
    except RateServiceError as e:
        log.debug("Command failed: %r", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SERVICE_ERROR

    print(output)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
