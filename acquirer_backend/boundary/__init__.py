"""
Boundary layer: adapters for PostgreSQL and S3-compatible object storage.
"""
