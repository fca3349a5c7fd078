"""Add new_col to posts

Revision ID: 20220820_000001
Revises: 20220819_220330
Create Date: 2022-08-20 00:00:01.000000

Existing rows take the server default of 100.
"""
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20220820_000001"
down_revision: Union[str, None] = "20220819_220330"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("posts") as batch_op:
        batch_op.add_column(
            sa.Column("new_col", sa.Integer(), nullable=False, server_default=sa.text("100"))
        )


def downgrade() -> None:
    # SQLite cannot drop columns in place; batch mode copies the table
    with op.batch_alter_table("posts") as batch_op:
        batch_op.drop_column("new_col")
