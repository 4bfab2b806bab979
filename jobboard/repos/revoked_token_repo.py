import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.models.revoked_token import RevokedToken
from jobboard.core.security import generate_id

logger = logging.getLogger(__name__)


def is_revoked(db: Session, token: str) -> bool:
    return db.query(RevokedToken.id).filter(RevokedToken.token == token).first() is not None


def add(db: Session, token: str, expires_at: datetime) -> bool:
    """Record a revoked token. Returns False if it was already present."""
    db.add(RevokedToken(id=generate_id(), token=token, expires_at=expires_at))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return False
    return True


def purge_expired(db: Session, now: datetime) -> int:
    """Delete ledger entries whose token has expired anyway. Returns count deleted."""
    count = (
        db.query(RevokedToken)
        .filter(RevokedToken.expires_at < now)
        .delete(synchronize_session=False)
    )
    db.commit()
    if count:
        logger.info("Purged %d expired revoked tokens", count)
    return count
