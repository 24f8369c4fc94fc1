#!/usr/bin/env python3
"""Apply Alembic migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database schema, logging the outcome to Logfire."""
    configure_logfire(Settings())

    try:
        with logfire.span("run_migrations"):
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
