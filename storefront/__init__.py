"""
Storefront API - Application Package
=====================================

Layered FastAPI backend for the storefront's product catalogue:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Validation, Mapping)  │  ← ProductService
    ├─────────────────────────────────────┤
    │     Repository (Persistence Client) │  ← ProductRepository
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
