"""
HTTP API for the catalog views.
"""
