"""
Multipart upload helpers.

Reads an optional UploadFile into a LicenseUpload for the service layer.

Dependencies: fastapi, acquirer_backend.core.license_documents
System role: Request file extraction
"""

from fastapi import UploadFile

from acquirer_backend.core.license_documents import LicenseUpload


async def read_license_upload(file: UploadFile | None) -> LicenseUpload | None:
    """
    Read an uploaded license file into memory.

    Args:
        file: Multipart file part, or None when the client sent no file

    Returns:
        LicenseUpload, or None when no (or an empty-named) file part was sent
    """
    if file is None or not file.filename:
        return None

    content = await file.read()
    await file.close()
    return LicenseUpload(
        filename=file.filename,
        content=content,
        content_type=file.content_type,
    )
