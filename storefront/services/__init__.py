# Services package init
"""
Storefront API - Services Layer

Service Inventory:
    - ProductService: validates creation requests and maps DTOs
    - ProductRepository: persistence client writing the products table

Both are handed to routes through FastAPI's dependency injection.
"""
