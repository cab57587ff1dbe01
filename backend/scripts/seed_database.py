"""Seed MongoDB with the invoices dashboard placeholder data.

Usage:
    cd backend
    python -m scripts.seed_database [--uri mongodb://localhost:27017] [--bcrypt-rounds 10]

Runs the same seeder as ``GET /seed``, prints the JSON payload the endpoint
would return and exits with status 1 on failure.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from dashboard_api.config import Settings, get_settings
from dashboard_api.data.placeholder import get_placeholder_dataset
from dashboard_api.models.seed import SeedResult, render_seed_result
from dashboard_api.services.seeder import DatabaseSeeder

logger = logging.getLogger("seed_database")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--uri", help="MongoDB connection string (overrides MONGODB_URI)")
    parser.add_argument(
        "--bcrypt-rounds",
        type=int,
        help="bcrypt cost factor (overrides BCRYPT_ROUNDS)",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    overrides: dict[str, object] = {}
    if args.uri:
        overrides["MONGODB_URI"] = args.uri
    if args.bcrypt_rounds is not None:
        overrides["BCRYPT_ROUNDS"] = args.bcrypt_rounds
    base = get_settings()
    if not overrides:
        return base
    return Settings.model_validate({**base.model_dump(), **overrides})


async def run(settings: Settings) -> SeedResult:
    seeder = DatabaseSeeder(settings=settings, dataset=get_placeholder_dataset())
    return await seeder.seed()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the seeding script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as exc:
        err = exc.errors()[0]
        parser.error(f"invalid {err['loc'][0]}: {err['msg']}")

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    result = asyncio.run(run(settings))
    _, body = render_seed_result(result)
    print(json.dumps(body, indent=2))
    if not result.success:
        logger.error("Seeding failed: %s", result.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
