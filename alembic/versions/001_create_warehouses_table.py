"""create warehouses table

Revision ID: 001
Revises:
Create Date: 2025-03-02 10:00:00.000000

"""

from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    warehouses = op.create_table(
        "warehouses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("business_unit_code", sa.String(64), nullable=False),
        sa.Column("location", sa.String(64), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("archived_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("capacity >= 0", name="ck_warehouses_capacity_non_negative"),
        sa.CheckConstraint("stock >= 0", name="ck_warehouses_stock_non_negative"),
    )
    op.create_index("ix_warehouses_id", "warehouses", ["id"], unique=False)
    op.create_index(
        "ix_warehouses_business_unit_code", "warehouses", ["business_unit_code"], unique=True
    )
    op.create_index("ix_warehouses_location", "warehouses", ["location"], unique=False)

    # Seed warehouses
    op.bulk_insert(
        warehouses,
        [
            {
                "business_unit_code": "MWH.001",
                "location": "ZWOLLE-001",
                "capacity": 100,
                "stock": 10,
                "created_at": datetime(2024, 7, 1, tzinfo=timezone.utc),
                "archived_at": None,
            },
            {
                "business_unit_code": "MWH.012",
                "location": "AMSTERDAM-001",
                "capacity": 50,
                "stock": 5,
                "created_at": datetime(2023, 7, 1, tzinfo=timezone.utc),
                "archived_at": None,
            },
            {
                "business_unit_code": "MWH.023",
                "location": "TILBURG-001",
                "capacity": 30,
                "stock": 27,
                "created_at": datetime(2021, 2, 1, tzinfo=timezone.utc),
                "archived_at": None,
            },
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_warehouses_location", table_name="warehouses")
    op.drop_index("ix_warehouses_business_unit_code", table_name="warehouses")
    op.drop_index("ix_warehouses_id", table_name="warehouses")
    op.drop_table("warehouses")
