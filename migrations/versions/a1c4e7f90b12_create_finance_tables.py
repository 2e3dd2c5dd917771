"""create finance tables

Revision ID: a1c4e7f90b12
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "a1c4e7f90b12"
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "transaction_categories",
        *_audit_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "transaction_responsibles",
        *_audit_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "transaction_subcategories",
        *_audit_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["category_id"], ["transaction_categories.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "category_id", "name", name="uq_transaction_subcategories_category_name"
        ),
    )
    op.create_index(
        "ix_transaction_subcategories_category_id",
        "transaction_subcategories",
        ["category_id"],
        unique=False,
    )
    op.create_table(
        "transactions",
        *_audit_columns(),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("subtype", sa.String(length=16), nullable=False),
        sa.Column("source", sa.String(length=32), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("installments", sa.Integer(), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("reconciled", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("subcategory_id", sa.Integer(), nullable=True),
        sa.CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        sa.CheckConstraint(
            "installments IS NULL OR installments >= 1",
            name="ck_transactions_installments_min",
        ),
        sa.ForeignKeyConstraint(["category_id"], ["transaction_categories.id"]),
        sa.ForeignKeyConstraint(["subcategory_id"], ["transaction_subcategories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_transactions_user_id", "transactions", ["user_id"])
    op.create_index("ix_transactions_date", "transactions", ["date"])
    op.create_index("ix_transactions_category_id", "transactions", ["category_id"])
    op.create_table(
        "transaction_responsibilities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("transaction_id", sa.Integer(), nullable=False),
        sa.Column("responsible_id", sa.Integer(), nullable=False),
        sa.Column("percentage", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column(
            "calculated_amount", sa.Numeric(precision=12, scale=2), nullable=True
        ),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.CheckConstraint(
            "percentage > 0 AND percentage <= 100",
            name="ck_transaction_responsibilities_percentage",
        ),
        sa.ForeignKeyConstraint(
            ["transaction_id"], ["transactions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["responsible_id"], ["transaction_responsibles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_transaction_responsibilities_transaction_id",
        "transaction_responsibilities",
        ["transaction_id"],
    )
    op.create_table(
        "financial_goals",
        *_audit_columns(),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("goal_type", sa.String(length=32), nullable=False),
        sa.Column("target_amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            "current_amount",
            sa.Numeric(precision=12, scale=2),
            server_default="0",
            nullable=False,
        ),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column(
            "auto_calculate", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "target_amount > 0", name="ck_financial_goals_target_amount_positive"
        ),
        sa.CheckConstraint(
            "current_amount >= 0", name="ck_financial_goals_current_amount_nonneg"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_financial_goals_user_id", "financial_goals", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_financial_goals_user_id", table_name="financial_goals")
    op.drop_table("financial_goals")
    op.drop_index(
        "ix_transaction_responsibilities_transaction_id",
        table_name="transaction_responsibilities",
    )
    op.drop_table("transaction_responsibilities")
    op.drop_index("ix_transactions_category_id", table_name="transactions")
    op.drop_index("ix_transactions_date", table_name="transactions")
    op.drop_index("ix_transactions_user_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index(
        "ix_transaction_subcategories_category_id",
        table_name="transaction_subcategories",
    )
    op.drop_table("transaction_subcategories")
    op.drop_table("transaction_responsibles")
    op.drop_table("transaction_categories")
