# migrations/env.py

"""
Alembic environment for the users, members and sessions tables.

Migrations run synchronously through psycopg2 whatever driver the
application URL names.
"""

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from coworker.adapters.configuration.config import settings  # noqa: E402
from coworker.adapters.outbound.persistence.models import Base  # noqa: E402

MIGRATION_URL = make_url(str(settings.DATABASE_URL)).set(drivername="postgresql+psycopg2")

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)


def run_migrations_offline() -> None:
    configure(
        url=MIGRATION_URL.render_as_string(hide_password=False),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(MIGRATION_URL, poolclass=NullPool)
    with engine.connect() as connection:
        configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
