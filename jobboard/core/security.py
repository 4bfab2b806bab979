import hashlib
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import bcrypt
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from jobboard.config import settings
from jobboard.core.errors import TokenExpiredError, TokenInvalidError


def _prehash(password: str) -> bytes:
    """Pre-hash to avoid bcrypt's 72-byte limit."""
    return hashlib.sha256(password.encode()).digest()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_prehash(plain), hashed.encode())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes (SQLite round-trips) as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def create_access_token(subject: str, role: str) -> tuple[str, datetime]:
    """Sign a bearer token for ``subject``; returns (token, expires_at)."""
    issued_at = utcnow()
    expires_at = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": subject,
        "role": role,
        "iat": issued_at,
        "exp": expires_at,
        "jti": generate_id(),
    }
    token = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
    # exp is serialized in whole seconds
    return token, expires_at.replace(microsecond=0)


def decode_access_token(token: str) -> dict:
    """Return the verified claims or raise TokenExpiredError / TokenInvalidError."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpiredError() from e
    except JWTError as e:
        raise TokenInvalidError() from e


def generate_id() -> str:
    return str(uuid4())
