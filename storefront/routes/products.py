"""
Storefront API - Product Route Handlers
========================================

What:  Handles POST /api/products.
How:   FastAPI parses the JSON body into ProductCreationRequest, the
       repository and service arrive through Depends, and the service result
       is wrapped in the `productCreationResponse` envelope.

Errors are formatted by the global handlers in main.py:
    HTTP 400: missing field (ValidationError) or unparseable body
    HTTP 500: persistence failure (DatabaseError)
"""

import logging

from fastapi import APIRouter, Depends

from storefront.schemas.product import (
    ErrorResponse,
    ProductCreationEnvelope,
    ProductCreationRequest,
)
from storefront.services.product_repository import (
    ProductRepository,
    get_product_repository,
)
from storefront.services.product_service import ProductService, get_product_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Products"])


@router.post(
    "/products",
    status_code=200,
    response_model=ProductCreationEnvelope,
    responses={
        200: {"description": "Product created", "model": ProductCreationEnvelope},
        400: {"description": "Missing required field or malformed body", "model": ErrorResponse},
        500: {"description": "Product could not be saved", "model": ErrorResponse},
    },
    summary="Create a product",
    description=(
        "Creates a product from title, description, price and an optional image. "
        "Title and description must be non-empty and price must be non-zero."
    ),
)
async def create_product(
    payload: ProductCreationRequest,
    repository: ProductRepository = Depends(get_product_repository),
    service: ProductService = Depends(get_product_service),
) -> ProductCreationEnvelope:
    """Create a product and return it wrapped under `productCreationResponse`."""
    product = await service.create_product(repository, payload)
    return ProductCreationEnvelope(product_creation_response=product)
