#!/usr/bin/env python3
"""
Command-line interface for the shortlinks service.

Usage:
    python shortlinks_cli.py shorten <url>
    python shortlinks_cli.py resolve <short_code>
    python shortlinks_cli.py info <short_code>
    python shortlinks_cli.py list [--limit N]
    python shortlinks_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from shortlinks.database.postgres import ShortLinkPostgresDB
from shortlinks.database.cache import RedisCache
from shortlinks.errors import ShortLinkError
from shortlinks.service import ShortLinkService
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging


class ShortLinksCLI:
    """Command-line interface for shortlinks."""

    def __init__(
        self,
        db_url: Optional[str],
        redis_url: Optional[str] = None,
        verbose: bool = False,
        service: Optional[ShortLinkService] = None,
    ):
        """Initialize CLI.

        Args:
            db_url: PostgreSQL connection URL
            redis_url: Optional Redis connection URL
            verbose: Log at DEBUG level
            service: Prebuilt service (skips connecting)
        """
        self.db_url = db_url
        self.redis_url = redis_url
        self.verbose = verbose
        # stdout carries the JSON results
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING", stream=sys.stderr)
        self.service = service

    async def initialize(self):
        """Connect to the store and build the service."""
        if self.service:
            return

        if not self.db_url:
            raise ShortLinkError("A database URL is required (--db-url or DATABASE_URL)")

        db = ShortLinkPostgresDB(db_config=self.db_url, logger=self.logger)

        cache = None
        if self.redis_url:
            cache = RedisCache(redis_url=self.redis_url, logger=self.logger)
            await cache.connect()

        self.service = ShortLinkService(
            db=db,
            cache=cache,
            short_code_generator=ShortCodeGenerator(),
            logger=self.logger,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    def _emit(self, payload: dict, error: bool = False) -> int:
        print(json.dumps(payload, indent=2, default=str), file=sys.stderr if error else sys.stdout)
        return 1 if error else 0

    async def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            link = await self.service.submit(url)
        except ShortLinkError as e:
            return self._emit({"success": False, "error": e.message, **e.details}, error=True)

        return self._emit({"success": True, **link.to_dict()})

    async def resolve(self, short_code: str) -> int:
        """Resolve a short code the way a redirect does (counts a click)."""
        try:
            original_url = await self.service.resolve(short_code)
        except ShortLinkError as e:
            return self._emit({"success": False, "short_code": short_code, "error": e.message}, error=True)

        return self._emit({"success": True, "short_code": short_code, "original_url": original_url})

    async def info(self, short_code: str) -> int:
        """Show a link and its click count without counting a click."""
        link = await self.service.get_link(short_code)

        if not link:
            return self._emit({"success": False, "error": f"Short code '{short_code}' not found"}, error=True)

        return self._emit({"success": True, **link.to_dict()})

    async def list_links(self, limit: int = 100) -> int:
        """List recent links."""
        links = await self.service.list_recent_links(limit)

        return self._emit({
            "success": True,
            "count": len(links),
            "links": [link.to_dict() for link in links],
        })

    async def health(self) -> int:
        """Check service health."""
        health_status = await self.service.health_check()

        self._emit({"success": True, "health": health_status})
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shortlinks CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Follow a short code (counts a click)
  %(prog)s resolve aB3xY9z

  # Show a link and its clicks
  %(prog)s info aB3xY9z

  # List recent links
  %(prog)s list --limit 10

  # Check health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--db-url",
        default=os.getenv("DATABASE_URL"),
        help="PostgreSQL connection URL (default: from DATABASE_URL env)"
    )

    parser.add_argument(
        "--redis-url",
        default=os.getenv("REDIS_URL"),
        help="Redis connection URL (optional, default: from REDIS_URL env)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a short code (counts a click)")
    resolve_parser.add_argument("short_code", help="Short code to resolve")

    info_parser = subparsers.add_parser("info", help="Show a link and its click count")
    info_parser.add_argument("short_code", help="Short code to show")

    list_parser = subparsers.add_parser("list", help="List recent links")
    list_parser.add_argument("--limit", type=int, default=100, help="Maximum number to return")

    subparsers.add_parser("health", help="Check service health")

    return parser


async def main(argv=None, service: Optional[ShortLinkService] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShortLinksCLI(
        db_url=args.db_url,
        redis_url=args.redis_url,
        verbose=args.verbose,
        service=service,
    )

    try:
        await cli.initialize()
    except ShortLinkError as e:
        return cli._emit({"success": False, "error": e.message}, error=True)

    try:
        if args.command == "shorten":
            return await cli.shorten(args.url)
        elif args.command == "resolve":
            return await cli.resolve(args.short_code)
        elif args.command == "info":
            return await cli.info(args.short_code)
        elif args.command == "list":
            return await cli.list_links(args.limit)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
