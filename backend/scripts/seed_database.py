#!/usr/bin/env python3
"""Seed the InvDash database with sample data.

Deletes every row and inserts the sample users, catalog, suppliers, one
purchase order and one AI recommendation.

Usage:
  python backend/scripts/seed_database.py
  python backend/scripts/seed_database.py --database-url sqlite+aiosqlite:///invdash.sqlite3 --create-schema
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

import structlog

# Add backend/ to import path when run as a script.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import get_settings
from db.seed import SeedSummary, seed_database
from db.session import Base, make_engine, make_sessionmaker

logger = structlog.get_logger()


async def _seed(args: argparse.Namespace) -> SeedSummary:
    settings = get_settings()
    engine = make_engine(args.database_url or settings.database_url, echo=settings.database_echo)
    try:
        if args.create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        session_factory = make_sessionmaker(engine)
        async with session_factory() as db:
            return await seed_database(db)
    finally:
        await engine.dispose()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replace all InvDash data with the sample data set")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    print("Starting database seed...")
    try:
        summary = asyncio.run(_seed(args))
    except Exception as exc:
        logger.error("seed.failed", error=str(exc), error_type=type(exc).__name__)
        print(f"Error seeding database: {exc}", file=sys.stderr)
        return 1

    print("Database seeded successfully!")
    for line in summary.lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
