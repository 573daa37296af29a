#!/usr/bin/env python3
"""Apply the inkwell comment schema migrations.

Usage: run_migrations.py [REVISION]

Upgrades the database to REVISION (default ``head``). Failures are
reported to Logfire and re-raised so the container never starts against a
half-migrated schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from inkwell.config import Settings
from inkwell.util.observability import configure_logfire

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def load_alembic_config() -> Config:
    """Load alembic.ini from the project root, independent of the cwd."""
    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    return alembic_cfg


def main(argv: list[str]) -> int:
    """Upgrade the comment schema to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = load_alembic_config()
    script = ScriptDirectory.from_config(alembic_cfg)

    with logfire.span(
        "inkwell.migrate", target=target, head=script.get_current_head()
    ):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Comment schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Comment schema is at {target}", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
