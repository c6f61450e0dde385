"""
Storefront API - Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the product API contract.
Why:   Automatic JSON parsing, response serialization, and OpenAPI docs.

Design Decision:
    Request fields are all Optional at the schema level. Presence checks live
    in ProductService so that a missing field yields the documented 400
    message instead of FastAPI's generic 422 field list. Type errors (e.g. a
    price of "abc", or an overflowing 1e309) are still caught by Pydantic and
    mapped to 400 by the RequestValidationError handler in main.py.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ProductCreationRequest(BaseModel):
    """Body of POST /api/products."""

    title: Optional[str] = Field(default=None, description="Product title (required, non-empty)")
    description: Optional[str] = Field(
        default=None, description="Product description (required, non-empty)"
    )
    price: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Unit price (required, non-zero, finite)",
    )
    image: Optional[str] = Field(default=None, description="Image URL or path (optional)")


class ProductRecord(BaseModel):
    """
    Creation payload handed to the persistence client.

    Contains exactly the four product fields; it only exists once
    validation has passed, so title, description and price are required here.
    """

    title: str
    description: str
    price: float = Field(allow_inf_nan=False)
    image: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ProductCreationResponse(BaseModel):
    """
    What:  A freshly created product as stored by the database.
    Who:   Nested in ProductCreationEnvelope by POST /api/products.
    """

    id: int = Field(description="Identifier assigned by the database")
    title: str = Field(description="Product title")
    description: str = Field(description="Product description")
    price: float = Field(description="Unit price")
    image: Optional[str] = Field(default=None, description="Image URL or path, null if absent")

    model_config = ConfigDict(from_attributes=True)


class ProductCreationEnvelope(BaseModel):
    """
    Top-level body of a successful POST /api/products.

    The product is wrapped under the camelCase key the storefront frontend
    reads: {"productCreationResponse": {...}}.
    """

    product_creation_response: ProductCreationResponse = Field(
        alias="productCreationResponse",
    )

    model_config = ConfigDict(populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Product title, description, and price are required fields.",
            "details": {"missing_fields": ["price"]},
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
