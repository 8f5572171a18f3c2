# app/core/security.py
import secrets
import hashlib
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from app.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a password for storage.

    Args:
        password: Plain password

    Returns:
        pbkdf2_sha256 hash string
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """
    Compare a plain password with the stored hash.

    Args:
        plain_password: Password submitted by the user
        password_hash: Hash stored in the database

    Returns:
        True if the password matches
    """
    if not password_hash:
        return False
    try:
        return pwd_context.verify(plain_password, password_hash)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def generate_session_id() -> str:
    """
    Generate a cryptographically secure session ID.

    Returns:
        64-character hexadecimal session ID
    """
    return secrets.token_hex(32)


def hash_session_id(session_id: str) -> str:
    """
    Hash session ID for storage in database.

    Args:
        session_id: Plain session ID

    Returns:
        SHA-256 hash of session ID
    """
    return hashlib.sha256(session_id.encode()).hexdigest()


def get_session_expiry() -> datetime:
    """
    Calculate session expiry datetime.

    Returns:
        Datetime when session should expire (timezone-aware UTC)
    """
    return datetime.now(timezone.utc) + timedelta(seconds=settings.SESSION_MAX_AGE)


def get_current_utc_time() -> datetime:
    """
    Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)
