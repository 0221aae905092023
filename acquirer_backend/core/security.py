"""
Password hashing and access token helpers.

PBKDF2-SHA256 password hashes and HS256 JWT access tokens for portal users.

Dependencies: PyJWT, hashlib (stdlib)
System role: Credential verification and token issuance
"""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from acquirer_backend.core.exceptions import AuthenticationError

PASSWORD_SCHEME = "pbkdf2:sha256"
PASSWORD_ITERATIONS = 100_000


def hash_password(password: str, iterations: int = PASSWORD_ITERATIONS) -> str:
    """
    Hash a password using PBKDF2-SHA256 with a random salt.

    Args:
        password: Clear text password
        iterations: PBKDF2 iteration count

    Returns:
        str: Encoded hash "pbkdf2:sha256:<iterations>$<salt>$<hex digest>"
    """
    salt = secrets.token_hex(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{PASSWORD_SCHEME}:{iterations}${salt}${dk.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its stored hash.

    Args:
        password: Clear text candidate
        password_hash: Value produced by hash_password()

    Returns:
        bool: True when the password matches
    """
    if not password_hash or not password_hash.startswith(PASSWORD_SCHEME + ":"):
        return False

    parts = password_hash.split("$")
    if len(parts) != 3:
        return False

    header, salt, stored_hash = parts
    try:
        iterations = int(header.rsplit(":", 1)[1])
    except ValueError:
        return False

    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return hmac.compare_digest(dk.hex(), stored_hash)


def create_access_token(
    user_id: int,
    email: str,
    secret: str,
    algorithm: str = "HS256",
    expires_minutes: int = 60,
) -> str:
    """
    Issue a signed access token for a portal user.

    Args:
        user_id: Portal user primary key
        email: Portal user email
        secret: HMAC signing secret
        algorithm: JWT algorithm
        expires_minutes: Token lifetime

    Returns:
        str: Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Decode and verify an access token.

    Args:
        token: Encoded JWT
        secret: HMAC signing secret
        algorithm: Expected JWT algorithm

    Returns:
        dict: Token claims (id, email, iat, exp)

    Raises:
        AuthenticationError: If the token is expired, malformed or lacks an id claim
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Invalid token") from e

    if not isinstance(payload.get("id"), int):
        raise AuthenticationError("Invalid token")
    return payload
