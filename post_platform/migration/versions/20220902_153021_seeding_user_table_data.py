"""Seed the users table

Revision ID: 20220902_153021
Revises: 20220820_000001
Create Date: 2022-09-02 15:30:21.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20220902_153021"
down_revision: Union[str, None] = "20220820_000001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SEED_EMAIL = "account@example.com"

users = sa.table(
    "users",
    sa.column("email", sa.String),
    sa.column("hash", sa.String),
)


def upgrade() -> None:
    # Placeholder, not a password hash: the account cannot log in until reset
    op.bulk_insert(users, [{"email": SEED_EMAIL, "hash": "not hashed yet"}])


def downgrade() -> None:
    op.execute(users.delete().where(users.c.email == SEED_EMAIL))
