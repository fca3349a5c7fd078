"""
Schema migrations for the post service, driven by Alembic.

The revision scripts live in ``versions/``. The helpers below run them against
an engine without needing ``alembic.ini``; the application applies them on
startup and the test suite uses them to build throwaway databases.
"""
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Connection, Engine

MIGRATION_DIR = Path(__file__).resolve().parent


def alembic_config(connection: Optional[Connection] = None, url: Optional[str] = None) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATION_DIR))
    if url is not None:
        # ConfigParser interpolation treats "%" as special
        cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    if connection is not None:
        cfg.attributes["connection"] = connection
    return cfg


def upgrade(engine: Engine, revision: str = "head") -> None:
    with engine.begin() as connection:
        command.upgrade(alembic_config(connection), revision)


def downgrade(engine: Engine, revision: str = "base") -> None:
    with engine.begin() as connection:
        command.downgrade(alembic_config(connection), revision)


def current_revision(engine: Engine) -> Optional[str]:
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()
