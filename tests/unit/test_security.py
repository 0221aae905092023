"""
Test suite for password hashing and access tokens.

System role: Verification of credential helpers
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from acquirer_backend.core.exceptions import AuthenticationError
from acquirer_backend.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


class TestPasswordHashing:
    """Test suite for hash_password() and verify_password()."""

    def test_hash_should_verify_with_same_password(self) -> None:
        password_hash = hash_password("correct horse", iterations=1000)

        assert verify_password("correct horse", password_hash) is True

    def test_hash_should_reject_wrong_password(self) -> None:
        password_hash = hash_password("correct horse", iterations=1000)

        assert verify_password("battery staple", password_hash) is False

    def test_hash_should_be_salted(self) -> None:
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)

    def test_hash_should_not_contain_clear_text(self) -> None:
        assert "topsecret" not in hash_password("topsecret", iterations=1000)

    @pytest.mark.parametrize(
        "stored",
        ["", "plaintext", "pbkdf2:sha256:abc$salt$hash", "pbkdf2:sha256:1000$only-two"],
    )
    def test_verify_should_reject_malformed_hashes(self, stored: str) -> None:
        assert verify_password("anything", stored) is False


class TestAccessTokens:
    """Test suite for create_access_token() and decode_access_token()."""

    def test_decode_should_return_claims(self) -> None:
        token = create_access_token(7, "hub@example.com", SECRET)

        claims = decode_access_token(token, SECRET)

        assert claims["id"] == 7
        assert claims["email"] == "hub@example.com"
        assert claims["exp"] > claims["iat"]

    def test_decode_should_reject_wrong_secret(self) -> None:
        token = create_access_token(7, "hub@example.com", SECRET)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token, "other-secret")

    def test_decode_should_reject_expired_token(self) -> None:
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {"id": 7, "email": "hub@example.com", "iat": past, "exp": past + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError, match="Token expired"):
            decode_access_token(token, SECRET)

    def test_decode_should_reject_token_without_integer_id(self) -> None:
        token = jwt.encode({"id": "7", "email": "hub@example.com"}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError):
            decode_access_token(token, SECRET)

    def test_decode_should_reject_garbage(self) -> None:
        with pytest.raises(AuthenticationError):
            decode_access_token("not-a-jwt", SECRET)
