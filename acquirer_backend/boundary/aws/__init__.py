"""
Object storage boundary.

Dependencies: boto3
System role: S3-compatible storage adapters
"""

from acquirer_backend.boundary.aws.s3_client import LicenseDocumentClient

__all__ = ["LicenseDocumentClient"]
