# Routes package init
"""
Storefront API - Routes Package

Route Inventory:
    - products.py:  POST /api/products   (create a product)
    - health.py:    GET  /health         (service health check)

Routes stay thin: parse the request, call a service, return its result.
"""
