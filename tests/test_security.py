from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from jobboard.config import settings
from jobboard.core.errors import TokenExpiredError, TokenInvalidError
from jobboard.core.security import (
    as_utc,
    create_access_token,
    decode_access_token,
    generate_id,
    hash_password,
    verify_password,
)


def test_password_hash_and_verify_roundtrip():
    plain = "StrongPass123!"
    hashed = hash_password(plain)
    assert hashed != plain
    assert verify_password(plain, hashed) is True
    assert verify_password("wrong", hashed) is False


def test_long_password_is_not_truncated():
    base = "x" * 80
    hashed = hash_password(base + "a")
    assert verify_password(base + "a", hashed) is True
    assert verify_password(base + "b", hashed) is False


def test_access_token_carries_subject_and_role():
    token, expires_at = create_access_token("user-123", "HRD")
    claims = decode_access_token(token)
    assert claims["sub"] == "user-123"
    assert claims["role"] == "HRD"
    assert claims["exp"] == int(expires_at.timestamp())
    assert expires_at > datetime.now(timezone.utc) + timedelta(days=6)


def test_tokens_are_unique_per_issue():
    first, _ = create_access_token("u1", "Society")
    second, _ = create_access_token("u1", "Society")
    assert first != second


def test_decode_rejects_garbage_and_wrong_key():
    with pytest.raises(TokenInvalidError):
        decode_access_token("not-a-jwt")
    forged = jwt.encode({"sub": "u1", "role": "HRD"}, "other-key", algorithm=settings.algorithm)
    with pytest.raises(TokenInvalidError):
        decode_access_token(forged)


def test_decode_expired_token():
    past = datetime.now(timezone.utc) - timedelta(minutes=5)
    token = jwt.encode({"sub": "u1", "role": "HRD", "exp": past}, settings.secret_key, algorithm=settings.algorithm)
    with pytest.raises(TokenExpiredError):
        decode_access_token(token)


def test_as_utc_and_generate_id():
    naive = datetime(2024, 1, 1, 12, 0)
    assert as_utc(naive).tzinfo == timezone.utc
    offset = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(offset) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert as_utc(None) is None
    assert len(generate_id()) > 10
