"""
License document storage configuration.

Settings for the S3-compatible bucket holding business license PDFs.
An explicit endpoint URL allows pointing the client at MinIO.

Dependencies: pydantic_settings
System role: Object storage configuration for license documents
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LicenseStorageSettings(BaseSettings):
    """Settings for license document bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_LICENSE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="merchant-documents",
        description="Bucket for business license documents",
    )
    region: str = Field(
        default="us-east-1",
        description="Region of the bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint (e.g. http://localhost:9000 for MinIO)",
    )
    access_key_id: str | None = Field(default=None, description="Access key id")
    secret_access_key: str | None = Field(default=None, description="Secret access key")
    presigned_url_expiry: int = Field(
        default=3600,
        description="Presigned URL expiry in seconds (default 1 hour)",
    )
    max_file_size_mb: int = Field(
        default=5,
        description="Largest accepted license document in megabytes",
    )

    @property
    def max_file_size(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024
