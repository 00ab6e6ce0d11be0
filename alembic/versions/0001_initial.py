"""services and orders collections

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "services",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("service_id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("price", sa.String(length=64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("img", sa.String(length=1024), nullable=True),
        sa.Column("facility", sa.JSON(), nullable=False),
    )
    op.create_index("ix_services_service_id", "services", ["service_id"])

    op.create_table(
        "orders",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("document", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_orders_email_created", "orders", ["email", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_orders_email_created", table_name="orders")
    op.drop_table("orders")
    op.drop_index("ix_services_service_id", table_name="services")
    op.drop_table("services")
