"""
Product catalogue clients.

- real_http: talks to the product service over HTTP
- mocks: serves the same records from a local JSON file

Both implement ProductCatalogueClient and return contract models.
"""
