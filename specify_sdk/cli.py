"""Command-line interface for the Specify publisher SDK."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace

from .client import Specify
from .config import load_config
from .errors import SpecifyError
from .logging_setup import configure_logging
from .models import ImageFormat, ServeOptions


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="specify-sdk",
        description="Resolve publisher ad content for wallet addresses",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to specify.yaml (default: specify.yaml in the working directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    serve_parser = sub.add_parser("serve", help="Fetch an ad for wallet address(es)")
    serve_parser.add_argument(
        "addresses",
        nargs="*",
        help="Wallet addresses (0x + 40 hex chars)",
    )
    serve_parser.add_argument(
        "--image-format",
        choices=[f.value for f in ImageFormat],
        default=None,
        help="Requested creative shape",
    )
    serve_parser.add_argument("--ad-unit-id", default=None, help="Placement identifier")
    serve_parser.add_argument(
        "--cache",
        dest="use_cache",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override the configured local cache policy",
    )

    return parser


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command; returns the process exit code."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    if args.use_cache is not None:
        config = replace(config, cache=replace(config.cache, enabled=args.use_cache))

    options = ServeOptions(
        image_format=ImageFormat(args.image_format) if args.image_format else None,
        ad_unit_id=args.ad_unit_id,
    )

    try:
        async with Specify(config) as client:
            ad = await client.serve(args.addresses, options)
    except SpecifyError as e:
        print(f"{type(e).__name__}: {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(ad.to_dict() if ad else None, indent=2))
    return 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
