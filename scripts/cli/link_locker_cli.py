#!/usr/bin/env python3
"""
Command-line interface for the link locker store.

Works directly on the links file, without a running server.

Usage:
    python link_locker_cli.py create <target> [--code CODE]
    python link_locker_cli.py get <code>
    python link_locker_cli.py list
"""

import argparse
import asyncio
import json
import os
import sys
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import load_config
from linklocker.errors import LinkLockerError
from linklocker.service import LinkService
from linklocker.shortcode import ShortCodeGenerator
from linklocker.store import LinkStore
from linklocker.common.logging_config import setup_logging


class LinkLockerCLI:
    """Command-line interface for link locker."""

    def __init__(self, links_file: str, code_length: int = 7, verbose: bool = False):
        # Logs go to stderr so stdout stays valid JSON
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING", stream=sys.stderr)
        self.store = LinkStore(path=links_file, logger=self.logger.getChild("store"))
        self.service = LinkService(
            store=self.store,
            short_code_generator=ShortCodeGenerator(default_length=code_length),
            logger=self.logger.getChild("service"),
        )

    async def create(self, target: str, code: Optional[str] = None) -> int:
        """Create a link."""
        try:
            link = await self.service.create_link(target, code)
        except LinkLockerError as e:
            print(json.dumps({"success": False, "error": str(e)}, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({"success": True, **link.to_dict()}, indent=2))
        return 0

    async def get(self, code: str) -> int:
        """Print the target for a code."""
        target = await self.service.get_target(code)

        if target is None:
            print(json.dumps({
                "success": False,
                "error": f"Short code '{code}' not found"
            }, indent=2), file=sys.stderr)
            return 1

        print(json.dumps({"success": True, "short": code, "target": target}, indent=2))
        return 0

    async def list_links(self) -> int:
        """Print every stored link."""
        links = await self.service.list_links()
        print(json.dumps({link.code: link.target for link in links}, indent=2))
        return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    config = load_config()

    parser = argparse.ArgumentParser(description="Link locker CLI")
    parser.add_argument(
        "--links-file",
        default=config.links_file,
        help=f"Links JSON document (default: {config.links_file})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="Create a short link")
    create_parser.add_argument("target", help="Destination URL")
    create_parser.add_argument("--code", help="Custom short code")

    get_parser = subparsers.add_parser("get", help="Look up a short code")
    get_parser.add_argument("code", help="Short code")

    subparsers.add_parser("list", help="List all links")

    parser.set_defaults(code_length=config.short_code_length)
    return parser


async def run(args: argparse.Namespace) -> int:
    """Dispatch the parsed command."""
    cli = LinkLockerCLI(
        links_file=args.links_file,
        code_length=args.code_length,
        verbose=args.verbose,
    )

    if args.command == "create":
        return await cli.create(args.target, args.code)
    if args.command == "get":
        return await cli.get(args.code)
    return await cli.list_links()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except OSError as e:
        print(json.dumps({"success": False, "error": f"Storage error: {e}"}, indent=2), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
