"""
Mock integration clients.

These clients return product records without calling any external API.
They are used when:
- the product service is not running locally
- we want to exercise the views end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients return data shaped according to catalog/integrations/contracts/*
"""

from .local_products import LocalProductsClient

__all__ = ["LocalProductsClient"]
