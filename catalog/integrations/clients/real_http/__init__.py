"""
Real HTTP integration clients.

These clients communicate with the product service via HTTP:
- GET /products
- GET /products/{id}

Important:
- Must implement the same interface as the mock clients
- Must return data shaped according to catalog/integrations/contracts/*

Switching:
The selection of mock vs real clients should happen in catalog/api/main.py only.
"""

from .products_api import RealProductsClient

__all__ = ["RealProductsClient"]
