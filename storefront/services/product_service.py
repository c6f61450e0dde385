"""
Storefront API - Product Service (Product Creation Handler)
=============================================================

What:  Validates a product creation request, persists it, and shapes the response.
Why:   Keeps business rules independent of HTTP; the route only wraps the result.
Who:   Called by POST /api/products; calls ProductRepository.

Creation Flow:
    ┌──────────┐    ┌────────────┐    ┌──────────────┐    ┌────────────┐
    │ Request  │───▶│  Validate  │───▶│  Repository  │───▶│  Response  │
    │  (DTO)   │    │  required  │    │   .create    │    │    DTO     │
    └──────────┘    └────────────┘    └──────────────┘    └────────────┘

    Validation fails → ValidationError (400), repository never called
    Repository fails → DatabaseError (500), propagated unchanged

ProductService holds configuration only (allow_zero_price), no per-request
state. create_app() builds one instance and stores it on app.state.
"""

import logging
from typing import List, Optional

from fastapi import Request

from storefront.exceptions import ValidationError
from storefront.schemas.product import (
    ProductCreationRequest,
    ProductCreationResponse,
    ProductRecord,
)
from storefront.services.product_repository import ProductRepository
from storefront.utils.currency import format_to_dollar_currency

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Product title, description, and price are required fields."


class ProductService:
    """
    Business logic for product creation.

    Args:
        allow_zero_price: When False (default) a price of 0 counts as missing,
            matching the storefront's historical behaviour. None is always missing.
    """

    def __init__(self, allow_zero_price: bool = False):
        self.allow_zero_price = allow_zero_price

    def missing_fields(self, request: ProductCreationRequest) -> List[str]:
        """Names of required fields that are absent, empty, or zero-equivalent."""
        missing = []
        if not request.title:
            missing.append("title")
        if not request.description:
            missing.append("description")
        if not self._has_price(request.price):
            missing.append("price")
        return missing

    def _has_price(self, price: Optional[float]) -> bool:
        if price is None:
            return False
        if self.allow_zero_price:
            return True
        return bool(price)

    def validate(self, request: ProductCreationRequest) -> ProductRecord:
        """
        Check required fields and build the creation payload.

        Raises:
            ValidationError: title, description or price is missing
        """
        missing = self.missing_fields(request)
        if missing:
            raise ValidationError(message=REQUIRED_FIELDS_MESSAGE, missing_fields=missing)

        return ProductRecord(
            title=request.title,
            description=request.description,
            price=request.price,
            image=request.image,
        )

    async def create_product(
        self,
        repository: ProductRepository,
        request: ProductCreationRequest,
    ) -> ProductCreationResponse:
        """
        Validate → persist → map.

        Exactly one repository write per successful call; identical requests
        are not deduplicated.

        Returns:
            ProductCreationResponse built from the stored row

        Raises:
            ValidationError: required fields missing (nothing written)
            DatabaseError: the insert failed
        """
        record = self.validate(request)
        product = await repository.create(record)

        logger.info(
            "Product created: id=%s title='%s' price=%s",
            product.id,
            product.title,
            format_to_dollar_currency(product.price),
        )

        return ProductCreationResponse(
            id=product.id,
            title=product.title,
            description=product.description,
            price=product.price,
            image=product.image,
        )


def get_product_service(request: Request) -> ProductService:
    """FastAPI dependency returning the service configured by create_app()."""
    return request.app.state.product_service
