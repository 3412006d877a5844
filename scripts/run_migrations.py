#!/usr/bin/env python3
"""Apply (or roll back) database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py --to base  # drop everything
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from quill.config import Settings
from quill.util.observability import configure_logfire


def main() -> int:
    """Move the schema to the requested revision."""
    parser = argparse.ArgumentParser(description="Run Quill database migrations")
    parser.add_argument(
        "--to",
        default="head",
        help="Target revision: 'head', 'base' or a revision id (default: head)",
    )
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=args.to):
        try:
            if args.to == "base":
                command.downgrade(alembic_cfg, "base")
            else:
                command.upgrade(alembic_cfg, args.to)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=args.to,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start against a broken schema
            raise

    logfire.info("Database migrations completed", target=args.to)
    return 0


if __name__ == "__main__":
    sys.exit(main())
