"""
S3 client for license document bucket operations.

Uploads business license PDFs, generates presigned download URLs and
checks/deletes stored objects. An optional endpoint URL lets the same
client talk to MinIO or another S3-compatible store.

Dependencies: boto3, botocore
System role: Object storage adapter for merchant license documents
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from acquirer_backend.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class LicenseDocumentClient:
    """S3 client for the license document bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for the license bucket.

        Args:
            bucket: Bucket name for license storage
            region: Region of the bucket
            endpoint_url: Custom S3-compatible endpoint (MinIO)
            access_key_id: Explicit access key (falls back to the boto3 credential chain)
            secret_access_key: Explicit secret key
            s3_client: Pre-built boto3 client, mainly for tests
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    async def upload_document(
        self,
        s3_key: str,
        content: bytes,
        content_type: str = "application/pdf",
        metadata: dict[str, str] | None = None,
    ) -> str:
        """
        Upload a document to the bucket.

        Args:
            s3_key: Object key (path in bucket)
            content: File bytes
            content_type: MIME type stored with the object
            metadata: Optional user metadata

        Returns:
            str: The object key that was written

        Raises:
            StorageError: If the upload fails
        """
        try:
            # boto3 is synchronous, keep it off the event loop
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=s3_key,
                Body=content,
                ContentType=content_type,
                Metadata=metadata or {},
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                "Failed to upload license document",
                object_key=s3_key,
                details={"error": str(e)},
            ) from e

        logger.info(
            f"{__name__}:upload_document - Uploaded s3_key={s3_key}, size={len(content)} bytes"
        )
        return s3_key

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing an object.

        Args:
            s3_key: Object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            StorageError: If presigned URL generation fails
        """
        try:
            presigned_url = self._s3_client.generate_presigned_url(
                ClientMethod="get_object",
                Params={
                    "Bucket": self._bucket,
                    "Key": s3_key,
                },
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                "Failed to generate download URL",
                object_key=s3_key,
                details={"error": str(e)},
            ) from e

        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    async def file_exists(self, s3_key: str) -> bool:
        """
        Check if an object exists.

        Args:
            s3_key: Object key to check

        Returns:
            bool: True if the object exists, False otherwise

        Raises:
            StorageError: If the bucket cannot be queried
        """
        try:
            await asyncio.to_thread(self._s3_client.head_object, Bucket=self._bucket, Key=s3_key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise StorageError(
                "Failed to check license document",
                object_key=s3_key,
                details={"error": str(e)},
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                "Failed to check license document",
                object_key=s3_key,
                details={"error": str(e)},
            ) from e

    async def delete_document(self, s3_key: str) -> None:
        """
        Delete an object, used when a license document is replaced.

        Raises:
            StorageError: If the delete fails
        """
        try:
            await asyncio.to_thread(
                self._s3_client.delete_object,
                Bucket=self._bucket,
                Key=s3_key,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                "Failed to delete license document",
                object_key=s3_key,
                details={"error": str(e)},
            ) from e
