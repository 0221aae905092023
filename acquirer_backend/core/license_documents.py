"""
License document utilities.

Validation and object key generation for business license uploads.

Dependencies: None
System role: Upload validation shared by the drafting endpoints
"""

import uuid
from dataclasses import dataclass

from acquirer_backend.core.exceptions import DocumentValidationError

# Allowed file extensions for license upload
ALLOWED_EXTENSIONS = {"pdf"}
ALLOWED_CONTENT_TYPES = {"application/pdf", "application/x-pdf", "application/octet-stream"}
PDF_MAGIC = b"%PDF-"


@dataclass(frozen=True)
class LicenseUpload:
    """License file received from a multipart request."""

    filename: str
    content: bytes
    content_type: str | None = None


def validate_filename(filename: str | None) -> None:
    """
    Validate filename for security and allowed extensions.

    Args:
        filename: Original filename from the client

    Raises:
        DocumentValidationError: If filename is invalid or not a PDF
    """
    if not filename or len(filename) > 255:
        raise DocumentValidationError("Invalid filename length", filename)

    # Block path traversal attacks
    if ".." in filename or "/" in filename or "\\" in filename:
        raise DocumentValidationError("Invalid filename: path traversal detected", filename)

    if "." not in filename:
        raise DocumentValidationError("File must have an extension", filename)

    ext = filename.rsplit(".", 1)[-1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise DocumentValidationError(
            f"File type '.{ext}' not allowed. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            filename,
        )


def validate_license_document(
    filename: str | None,
    content: bytes,
    content_type: str | None,
    max_size: int,
) -> None:
    """
    Validate an uploaded license document.

    Args:
        filename: Original filename
        content: File bytes
        content_type: MIME type announced by the client
        max_size: Largest accepted size in bytes

    Raises:
        DocumentValidationError: If the file is empty, too large or not a PDF
    """
    validate_filename(filename)

    if content_type and content_type.split(";")[0].strip().lower() not in ALLOWED_CONTENT_TYPES:
        raise DocumentValidationError(f"Invalid content type: {content_type}", filename)
    if not content:
        raise DocumentValidationError("File is empty", filename)
    if len(content) > max_size:
        raise DocumentValidationError(
            f"File too large. Maximum size is {max_size // (1024 * 1024)}MB", filename
        )
    if not content.startswith(PDF_MAGIC):
        raise DocumentValidationError("File content is not a PDF", filename)


def generate_license_key(merchant_id: int, filename: str) -> str:
    """
    Generate unique object key to prevent collisions and security issues.

    Format: merchants/{merchant_id}/licenses/{unique_id}-{sanitized_name}.pdf

    Args:
        merchant_id: Owning merchant id
        filename: Original filename from the client

    Returns:
        str: Safe object key
    """
    base_name = filename.rsplit(".", 1)[0] if "." in filename else filename
    # Sanitize filename (only alphanumeric, hyphens, underscores)
    safe_name = "".join(c for c in base_name if c.isalnum() or c in "-_")
    if not safe_name:
        safe_name = "license"

    unique_id = str(uuid.uuid4())[:8]

    return f"merchants/{merchant_id}/licenses/{unique_id}-{safe_name}.pdf"
