"""
Storefront API - Product Repository (Persistence Client)
=========================================================

What:  The only component that writes products to the database.
Why:   Isolates SQLAlchemy from the business logic; ProductService talks to
       this small interface and can be tested against a mock of it.
How:   Wraps the per-request AsyncSession supplied by get_db_session.

Contract:
    create(record) -> Product
        Inserts one row, commits, and returns the stored Product with its
        database-assigned id. Driver/ORM failures are wrapped in
        DatabaseError and are never retried.
"""

import logging

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db_session
from storefront.exceptions import DatabaseError
from storefront.models.product import Product
from storefront.schemas.product import ProductRecord

logger = logging.getLogger(__name__)


class ProductRepository:
    """Persistence client for the `products` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: ProductRecord) -> Product:
        """
        Insert a product and return the stored row.

        The insert is a single statement committed on its own; a failure
        anywhere (flush or commit) rolls the session back and raises
        DatabaseError, so no partial row survives.

        Raises:
            DatabaseError: the insert or commit failed
        """
        product = Product(
            title=record.title,
            description=record.description,
            price=record.price,
            image=record.image,
        )
        try:
            self.session.add(product)
            await self.session.flush()  # assigns product.id
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to insert product '%s': %s", record.title, str(e))
            raise DatabaseError(
                message="Could not save the product. Please try again later.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.debug("Inserted product row id=%s", product.id)
        return product


def get_product_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ProductRepository:
    """FastAPI dependency: a repository bound to the request's session."""
    return ProductRepository(session)
