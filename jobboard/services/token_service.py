"""
Bearer token issue / verify / revoke.

Verification consults the revocation ledger before trusting the signature, so a
logged-out token is rejected even while its signature and expiry still check out.
Ledger entries expire together with the token they revoke.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from jobboard.core.errors import TokenInvalidError, TokenRevokedError
from jobboard.core.security import create_access_token, decode_access_token, utcnow
from jobboard.models.user import UserRole
from jobboard.repos import revoked_token_repo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: UserRole
    expires_at: datetime


def issue(user_id: str, role: UserRole) -> tuple[str, datetime]:
    return create_access_token(user_id, role.value)


def verify(db: Session, token: str) -> Identity:
    if revoked_token_repo.is_revoked(db, token):
        raise TokenRevokedError()
    claims = decode_access_token(token)
    user_id = claims.get("sub")
    role = claims.get("role")
    exp = claims.get("exp")
    if not user_id or not isinstance(exp, (int, float)):
        raise TokenInvalidError()
    try:
        role = UserRole(role)
    except ValueError as e:
        raise TokenInvalidError() from e
    return Identity(
        user_id=user_id,
        role=role,
        expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
    )


def revoke(db: Session, token: str, expires_at: datetime) -> None:
    """Idempotent: revoking an already revoked token is a no-op."""
    if not revoked_token_repo.add(db, token, expires_at):
        logger.info("Token already revoked; ignoring duplicate revoke")
    revoked_token_repo.purge_expired(db, utcnow())
