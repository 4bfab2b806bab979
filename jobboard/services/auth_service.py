import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from jobboard.core.security import verify_password
from jobboard.models.user import User, UserRole
from jobboard.repos import profile_repo, user_repo
from jobboard.services import token_service
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    token: str
    expires_at: datetime
    is_profile_complete: bool


def _create_empty_profile(db: Session, user: User) -> None:
    if user.role == UserRole.EMPLOYER.value:
        profile_repo.create_company(db, user.id)
    else:
        profile_repo.create_society(db, user.id)


def profile_complete(db: Session, user: User) -> bool:
    if user.role == UserRole.EMPLOYER.value:
        profile = profile_repo.get_company_by_user(db, user.id)
    else:
        profile = profile_repo.get_society_by_user(db, user.id)
    return bool(profile and profile.is_profile_complete)


def register(db: Session, name: str, email: str, password: str, role: UserRole) -> AuthResult:
    """
    Create the user and its empty profile. Either both exist afterwards or neither:
    if the profile insert fails the user is deleted again and the original error re-raised.
    """
    if user_repo.get_by_email(db, email):
        raise ConflictError("Email already registered")
    try:
        user = user_repo.create(db, name, email, password, role)
    except IntegrityError as e:
        raise ConflictError("Email already registered") from e

    try:
        _create_empty_profile(db, user)
    except Exception:
        logger.exception("Profile creation failed for user=%s; removing user", user.id)
        db.rollback()
        try:
            user_repo.delete_user(db, user.id)
        except Exception:
            logger.exception("Compensating delete failed for user=%s", user.id)
        raise

    token, expires_at = token_service.issue(user.id, role)
    logger.info("User registered: %s (%s)", user.email, role.value)
    return AuthResult(user=user, token=token, expires_at=expires_at, is_profile_complete=False)


def login(db: Session, email: str, password: str) -> AuthResult:
    user = user_repo.get_by_email(db, email)
    # Same error for unknown email and wrong password
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed for email=%s", email)
        raise InvalidCredentialsError()
    token, expires_at = token_service.issue(user.id, UserRole(user.role))
    complete = profile_complete(db, user)
    logger.info("User logged in: %s", user.email)
    return AuthResult(user=user, token=token, expires_at=expires_at, is_profile_complete=complete)


def logout(db: Session, token: str, identity: Identity) -> None:
    token_service.revoke(db, token, identity.expires_at)
    logger.info("User logged out: %s", identity.user_id)


def current_user(db: Session, identity: Identity) -> tuple[User, bool]:
    user = user_repo.get_by_id(db, identity.user_id)
    if not user:
        raise NotFoundError("User not found")
    return user, profile_complete(db, user)
