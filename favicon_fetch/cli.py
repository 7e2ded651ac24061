#!/usr/bin/env python3
"""
Command-line interface for the favicon_fetch library.

Prints the favicon of a site as a PNG data URI, optionally saving the decoded
image to a file.
"""

import argparse
import asyncio
import base64
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .config import ConfigLoader, FaviconConfig, LogLevel, VaultBackend
from .exceptions import ConfigurationError, InvalidURLError
from .fetcher import FaviconFetcher
from .logging import setup_logging
from .manager import FaviconManager
from .utils.url import DATA_URI_PREFIX
from .vault import MemoryVault

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="favicon-fetch",
        description="Fetch a website's favicon as a PNG data URI",
        epilog="Example: favicon-fetch example.com --save example.png",
    )
    parser.add_argument("url", help="Domain or URL, with or without scheme")
    parser.add_argument(
        "--config", type=Path, help="Configuration file (YAML or JSON)"
    )
    parser.add_argument(
        "--vault-dir", type=Path, help="Directory of the favicon vault"
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Skip the vault and always fetch from the network",
    )
    parser.add_argument(
        "--save", type=Path, metavar="PATH", help="Write the decoded image to PATH"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def build_config(args: argparse.Namespace) -> FaviconConfig:
    """Load configuration and apply command-line overrides."""
    config = ConfigLoader().load_config(args.config)

    if args.vault_dir:
        config.vault.backend = VaultBackend.FILE
        config.vault.directory = args.vault_dir
    if args.verbose:
        config.logging.level = LogLevel.DEBUG

    return config


async def run(config: FaviconConfig, url: str, use_cache: bool = True) -> Optional[str]:
    """Fetch one favicon with a manager built from config."""
    if not use_cache:
        # An uninitialized vault is never read or written
        async with FaviconFetcher(config.transport) as fetcher:
            return await FaviconManager(MemoryVault(), fetcher).fetch_favicon(url)

    async with FaviconManager.from_config(config) as manager:
        return await manager.fetch_favicon(url)


def report(console: Console, message: str, style: str) -> None:
    """Print a status message to stderr."""
    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = Console(stderr=True)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        report(console, f"Error: {e.message}", "bold red")
        return EXIT_USAGE

    try:
        setup_logging(config.logging)
    except OSError as e:
        report(console, f"Error: cannot open log file: {e}", "bold red")
        return EXIT_USAGE

    try:
        data_uri = asyncio.run(run(config, args.url, use_cache=not args.no_cache))
    except InvalidURLError as e:
        report(console, f"Error: {e.message}", "bold red")
        return EXIT_USAGE

    if data_uri is None:
        report(console, "No favicon available", "yellow")
        return EXIT_NOT_FOUND

    if args.save:
        try:
            args.save.write_bytes(base64.b64decode(data_uri[len(DATA_URI_PREFIX):]))
        except OSError as e:
            report(console, f"Error: cannot write {args.save}: {e}", "bold red")
            return EXIT_USAGE

    print(data_uri)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
