"""
Product catalog service: list and detail views over a read-only product API.
"""
