"""Initial schema — company, computer.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

computer.company_id has no ON DELETE CASCADE: the company service removes
dependent computers explicitly in the same transaction as the company.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "company",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "computer",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("introduced", sa.Date, nullable=True),
        sa.Column("discontinued", sa.Date, nullable=True),
        sa.Column(
            "company_id", sa.Integer,
            sa.ForeignKey("company.id", name="computer_company_id_fkey"),
            nullable=True,
        ),
    )
    op.create_index("ix_computer_name", "computer", ["name"])
    op.create_index("ix_computer_company_id", "computer", ["company_id"])


def downgrade() -> None:
    op.drop_index("ix_computer_company_id", table_name="computer")
    op.drop_index("ix_computer_name", table_name="computer")
    op.drop_table("computer")
    op.drop_table("company")
