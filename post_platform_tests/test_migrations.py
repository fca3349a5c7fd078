"""Tests for the Alembic migration chain."""
import pytest
from sqlalchemy import create_engine, inspect, text

from post_platform.migration import current_revision, downgrade, upgrade

HEAD = "20220902_153021"


@pytest.fixture
def fresh_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


def column_names(engine, table):
    return {col["name"] for col in inspect(engine).get_columns(table)}


def test_upgrade_creates_schema(fresh_engine):
    assert current_revision(fresh_engine) is None

    upgrade(fresh_engine)

    assert current_revision(fresh_engine) == HEAD
    tables = set(inspect(fresh_engine).get_table_names())
    assert {"posts", "users", "alembic_version"} <= tables
    assert column_names(fresh_engine, "posts") == {"id", "title", "text", "new_col"}
    assert column_names(fresh_engine, "users") == {"id", "email", "hash"}


def test_upgrade_seeds_user(fresh_engine):
    upgrade(fresh_engine)
    with fresh_engine.connect() as conn:
        rows = conn.execute(text("SELECT email, hash FROM users")).all()
    assert rows == [("account@example.com", "not hashed yet")]


def test_upgrade_is_idempotent(fresh_engine):
    upgrade(fresh_engine)
    upgrade(fresh_engine)
    assert current_revision(fresh_engine) == HEAD


def test_new_col_defaults_for_existing_rows(fresh_engine):
    upgrade(fresh_engine, "20220819_220330")
    with fresh_engine.begin() as conn:
        conn.execute(text("INSERT INTO posts (title, text) VALUES ('old', 'row')"))

    upgrade(fresh_engine)

    with fresh_engine.connect() as conn:
        assert conn.execute(text("SELECT new_col FROM posts")).scalar_one() == 100


def test_downgrade_one_step_at_a_time(fresh_engine):
    upgrade(fresh_engine)

    downgrade(fresh_engine, "20220820_000001")
    with fresh_engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM users")).scalar_one() == 0

    downgrade(fresh_engine, "20220819_220330")
    assert column_names(fresh_engine, "posts") == {"id", "title", "text"}

    downgrade(fresh_engine, "base")
    assert current_revision(fresh_engine) is None
    tables = set(inspect(fresh_engine).get_table_names())
    assert "posts" not in tables
    assert "users" not in tables
