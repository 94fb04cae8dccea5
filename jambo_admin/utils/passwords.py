"""Password hashing utilities (bcrypt)"""
import re

import bcrypt

from jambo_admin.exceptions import ValidationError

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72

_BCRYPT_HASH_RE = re.compile(r"^\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}$")


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt"""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Malformed hashes compare as a mismatch rather than raising.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def looks_hashed(value: str) -> bool:
    """True if ``value`` is already a bcrypt hash"""
    return bool(value) and _BCRYPT_HASH_RE.match(value) is not None


def ensure_hashed(value: str) -> str:
    """Return ``value`` hashed unless it is already a bcrypt hash"""
    if looks_hashed(value):
        return value
    return hash_password(value)
