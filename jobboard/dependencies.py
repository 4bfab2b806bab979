import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jobboard.core.errors import ForbiddenError, TokenError, UnauthenticatedError
from jobboard.database import get_db
from jobboard.models.user import UserRole
from jobboard.services import token_service
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    if not credentials or not credentials.credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise UnauthenticatedError("Not authenticated")
    return credentials.credentials


def get_current_identity(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> Identity:
    try:
        return token_service.verify(db, token)
    except TokenError as e:
        logger.info("Auth failed: %s", e.kind.value)
        raise UnauthenticatedError(e.message, reason=e.kind) from e


def require_role(role: UserRole):
    """Dependency factory: the caller must hold ``role``."""

    def _check(identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role != role:
            logger.info("Access denied: user=%s role=%s needs %s", identity.user_id, identity.role.value, role.value)
            raise ForbiddenError(f"Access restricted to {role.value} accounts")
        return identity

    return _check


get_current_employer = require_role(UserRole.EMPLOYER)
get_current_seeker = require_role(UserRole.SEEKER)
