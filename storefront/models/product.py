"""
Storefront API - Product SQLAlchemy Model
==========================================

What:  ORM model representing the `products` table.
Why:   Maps Python objects to database rows; Alembic reads it for migrations.
Who:   Written by ProductRepository, read by the migration environment.

Table Design:
    - Integer autoincrement primary key: the API contract exposes a numeric id
    - title / description: unbounded TEXT, NOT NULL; non-emptiness is enforced
      by the service and no length limit exists at the API level
    - price: FLOAT so the stored value echoes the submitted number exactly
    - image: unbounded TEXT, nullable (long URLs and data URIs fit)
"""

from typing import Optional

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Product(Base):
    """
    A product offered in the store.

    Rows are insert-only in this service: no update or delete path exists,
    and nothing deduplicates submissions, so identical payloads become
    distinct rows with distinct ids.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Identifier assigned by the database on insert",
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Product title shown in listings",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Long-form product description",
    )

    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Unit price in US dollars",
    )

    image: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Image URL or path; NULL when the product has no image",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, title='{self.title}', price={self.price})>"
