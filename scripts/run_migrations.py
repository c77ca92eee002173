#!/usr/bin/env python3
"""
Run Alembic migrations for the bank account schema.

Usage:
    python scripts/run_migrations.py upgrade [revision]
    python scripts/run_migrations.py downgrade [revision]
    python scripts/run_migrations.py current
    python scripts/run_migrations.py history

DATABASE_URL is read by alembic/env.py through the service settings.
"""

import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

ROOT_DIR = Path(__file__).resolve().parent.parent

COMMANDS = {
    "upgrade": lambda config, target: command.upgrade(config, target or "head"),
    "downgrade": lambda config, target: command.downgrade(config, target or "base"),
    "current": lambda config, target: command.current(config),
    "history": lambda config, target: command.history(config),
}


def main(argv: list[str]) -> int:
    """Dispatch an Alembic command; returns the process exit code."""
    if not argv or argv[0] not in COMMANDS:
        print(f"Usage: python scripts/run_migrations.py [{'|'.join(COMMANDS)}] [revision]")
        return 1

    config = Config(str(ROOT_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT_DIR / "alembic"))

    target = argv[1] if len(argv) > 1 else None
    COMMANDS[argv[0]](config, target)
    print(f"✓ alembic {' '.join(argv)}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
