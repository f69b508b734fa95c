"""Password hashing and opaque token helpers.

Passwords are stored as PBKDF2-SHA256 digests with a per-user random salt.
Session tokens, API tokens and device tokens are random strings handed to the
client once; only their SHA-256 hash is persisted.
"""

import base64
import hashlib
import hmac
import secrets

from app.core.config import settings

API_TOKEN_PREFIX = "wt_"


def hash_password(password: str, salt_b64: str | None = None) -> tuple[str, str]:
    """Return ``(hash_b64, salt_b64)`` for *password*."""
    salt = base64.b64decode(salt_b64) if salt_b64 else secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt, settings.password_iterations
    )
    return base64.b64encode(digest).decode("utf-8"), base64.b64encode(salt).decode("utf-8")


def verify_password(password: str, expected_hash: str, salt_b64: str) -> bool:
    computed, _ = hash_password(password, salt_b64)
    return hmac.compare_digest(computed, expected_hash)


def token_hash(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


def new_api_token() -> str:
    return f"{API_TOKEN_PREFIX}{secrets.token_hex(32)}"


def new_device_token() -> str:
    return secrets.token_urlsafe(24)


def new_access_code() -> str:
    """Short upper-case code printed on a device label."""
    return secrets.token_hex(4).upper()


def mask_token(token: str) -> str:
    """``wt_1a2b3c...f00d`` — enough to recognise a token, not to use it."""
    return f"{token[:8]}...{token[-4:]}"
