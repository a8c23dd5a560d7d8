"""Migration environment for the MentorConnect schema (profiles, mentors, sessions, feedback)."""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

from mentorconnect.config import settings
from mentorconnect.database import Base, create_db_engine
from mentorconnect import models  # noqa: F401 - register every table for --autogenerate

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL

# SQLite cannot ALTER constraints in place; batch mode rebuilds the table
render_as_batch = database_url.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=render_as_batch,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit SQL for the configured URL without connecting."""
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_db_engine(database_url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            _configure(connection=connection)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
