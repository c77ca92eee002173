"""Alembic environment for the bank account schema.

The database URL comes from the service settings (DATABASE_URL), so
migrations and the asyncpg repository always target the same database.
Supports offline (SQL script) and online (direct database) modes.
"""

import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from config import settings  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def sync_database_url(url: str) -> str:
    """Strip the asyncpg driver so SQLAlchemy uses its default sync driver"""
    return url.replace("postgresql+asyncpg://", "postgresql://").replace("asyncpg://", "postgresql://")


# Callers (e.g. tests) may pass a URL through config.attributes
database_url = config.attributes.get("database_url") or settings.DATABASE_URL
config.set_main_option("sqlalchemy.url", sync_database_url(database_url))

target_metadata = None


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without a live connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations through a short-lived sync engine."""
    engine = create_engine(
        sync_database_url(config.get_main_option("sqlalchemy.url")),
        poolclass=pool.NullPool,
    )

    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)

        with context.begin_transaction():
            context.run_migrations()

    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
