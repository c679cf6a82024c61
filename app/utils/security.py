# app/utils/security.py
import secrets
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.utils.settings import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _resolve_secret() -> str:
    if JWT_SECRET:
        return JWT_SECRET
    logger.warning("JWT_SECRET is not set, using a random per-process secret; tokens will not survive a restart")
    return secrets.token_urlsafe(48)


#klucz ustalany raz przy starcie procesu
_SECRET = _resolve_secret()


# bcrypt bierze max 72 bajty
def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:72]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_to_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_to_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # uszkodzony hash w bazie
        return False


def create_access_token(user_id: int, ttl_seconds: int = ACCESS_TOKEN_TTL_SECONDS) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=ttl_seconds),
    }
    return jwt.encode(payload, _SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> int | None:
    """Returns the user id embedded in the token, or None when it cannot be trusted."""
    try:
        payload = jwt.decode(
            token,
            _SECRET,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
        return int(payload["sub"])
    except (jwt.PyJWTError, ValueError, TypeError):
        return None
