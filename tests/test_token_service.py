from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from jobboard.config import settings
from jobboard.core.errors import TokenExpiredError, TokenInvalidError, TokenRevokedError
from jobboard.models.revoked_token import RevokedToken
from jobboard.models.user import UserRole
from jobboard.repos import revoked_token_repo
from jobboard.services import token_service


def _sign(claims: dict) -> str:
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def test_issue_then_verify(db_session):
    token, expires_at = token_service.issue("u1", UserRole.EMPLOYER)
    identity = token_service.verify(db_session, token)
    assert identity.user_id == "u1"
    assert identity.role == UserRole.EMPLOYER
    assert identity.expires_at == expires_at


def test_revoked_token_fails_even_before_expiry(db_session):
    token, expires_at = token_service.issue("u1", UserRole.SEEKER)
    token_service.revoke(db_session, token, expires_at)
    with pytest.raises(TokenRevokedError):
        token_service.verify(db_session, token)
    # Other tokens for the same user are unaffected
    other, _ = token_service.issue("u1", UserRole.SEEKER)
    assert token_service.verify(db_session, other).user_id == "u1"


def test_revoke_is_idempotent(db_session):
    token, expires_at = token_service.issue("u1", UserRole.SEEKER)
    token_service.revoke(db_session, token, expires_at)
    token_service.revoke(db_session, token, expires_at)
    assert db_session.query(RevokedToken).filter(RevokedToken.token == token).count() == 1


def test_revoke_purges_expired_entries(db_session):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    revoked_token_repo.add(db_session, "stale-token", past)
    token, expires_at = token_service.issue("u1", UserRole.SEEKER)
    token_service.revoke(db_session, token, expires_at)
    assert not revoked_token_repo.is_revoked(db_session, "stale-token")
    assert revoked_token_repo.is_revoked(db_session, token)


def test_verify_expired(db_session):
    past = datetime.now(timezone.utc) - timedelta(seconds=30)
    token = _sign({"sub": "u1", "role": "HRD", "exp": past})
    with pytest.raises(TokenExpiredError):
        token_service.verify(db_session, token)


def test_verify_rejects_unknown_role_and_missing_subject(db_session):
    future = datetime.now(timezone.utc) + timedelta(hours=1)
    with pytest.raises(TokenInvalidError):
        token_service.verify(db_session, _sign({"sub": "u1", "role": "Admin", "exp": future}))
    with pytest.raises(TokenInvalidError):
        token_service.verify(db_session, _sign({"role": "HRD", "exp": future}))
    with pytest.raises(TokenInvalidError):
        token_service.verify(db_session, _sign({"sub": "u1", "role": "HRD"}))


def test_verify_rejects_tampered_token(db_session):
    token, _ = token_service.issue("u1", UserRole.SEEKER)
    other, _ = token_service.issue("u2", UserRole.EMPLOYER)
    header, _, signature = token.split(".")
    forged = ".".join([header, other.split(".")[1], signature])
    with pytest.raises(TokenInvalidError):
        token_service.verify(db_session, forged)
