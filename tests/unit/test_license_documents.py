"""
Test suite for license document validation and object keys.

System role: Verification of upload validation rules
"""

import re

import pytest

from acquirer_backend.core.exceptions import DocumentValidationError
from acquirer_backend.core.license_documents import (
    generate_license_key,
    validate_filename,
    validate_license_document,
)

PDF = b"%PDF-1.7\n%%EOF"
ONE_MB = 1024 * 1024


class TestValidateFilename:
    """Test suite for validate_filename()."""

    def test_should_accept_pdf(self) -> None:
        validate_filename("license.PDF")

    @pytest.mark.parametrize(
        "filename, message",
        [
            ("", "Invalid filename length"),
            ("a" * 252 + ".pdf", "Invalid filename length"),
            ("../etc/passwd.pdf", "path traversal"),
            ("dir/license.pdf", "path traversal"),
            ("license", "must have an extension"),
            ("license.docx", "not allowed"),
        ],
    )
    def test_should_reject_invalid_names(self, filename: str, message: str) -> None:
        with pytest.raises(DocumentValidationError, match=message):
            validate_filename(filename)


class TestValidateLicenseDocument:
    """Test suite for validate_license_document()."""

    def test_should_accept_small_pdf(self) -> None:
        validate_license_document("license.pdf", PDF, "application/pdf", ONE_MB)

    def test_should_accept_missing_content_type(self) -> None:
        validate_license_document("license.pdf", PDF, None, ONE_MB)

    def test_should_reject_wrong_content_type(self) -> None:
        with pytest.raises(DocumentValidationError, match="Invalid content type"):
            validate_license_document("license.pdf", PDF, "image/png", ONE_MB)

    def test_should_reject_empty_file(self) -> None:
        with pytest.raises(DocumentValidationError, match="File is empty"):
            validate_license_document("license.pdf", b"", "application/pdf", ONE_MB)

    def test_should_reject_oversized_file(self) -> None:
        content = PDF + b"0" * ONE_MB

        with pytest.raises(DocumentValidationError, match="File too large. Maximum size is 1MB"):
            validate_license_document("license.pdf", content, "application/pdf", ONE_MB)

    def test_should_reject_non_pdf_content(self) -> None:
        with pytest.raises(DocumentValidationError, match="not a PDF"):
            validate_license_document("license.pdf", b"PK\x03\x04", "application/pdf", ONE_MB)

    def test_error_should_carry_filename(self) -> None:
        with pytest.raises(DocumentValidationError) as exc_info:
            validate_license_document("license.pdf", b"", None, ONE_MB)

        assert exc_info.value.details["filename"] == "license.pdf"
        assert exc_info.value.details["field"] == "file"


class TestGenerateLicenseKey:
    """Test suite for generate_license_key()."""

    def test_should_scope_key_under_merchant(self) -> None:
        key = generate_license_key(42, "Business Permit (2024).pdf")

        assert re.fullmatch(r"merchants/42/licenses/[0-9a-f]{8}-BusinessPermit2024\.pdf", key)

    def test_should_fall_back_when_name_has_no_safe_characters(self) -> None:
        key = generate_license_key(1, "(((.pdf")

        assert key.endswith("-license.pdf")

    def test_should_be_unique_per_call(self) -> None:
        assert generate_license_key(1, "a.pdf") != generate_license_key(1, "a.pdf")
