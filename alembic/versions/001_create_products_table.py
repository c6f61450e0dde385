"""Create products table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

Creates the `products` table written by POST /api/products.
Column definitions mirror storefront/models/product.py.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Identifier assigned by the database on insert",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Product title shown in listings",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=False,
            comment="Long-form product description",
        ),
        sa.Column(
            "price",
            sa.Float(),
            nullable=False,
            comment="Unit price in US dollars",
        ),
        sa.Column(
            "image",
            sa.Text(),
            nullable=True,
            comment="Image URL or path; NULL when the product has no image",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the products table (destroys all product data)."""
    op.drop_table("products")
