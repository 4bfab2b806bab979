"""
Application lifecycle: PENDING -> ACCEPTED | REJECTED, both terminal.

Pre-checks only reject early; the (position, society) unique constraint and the
conditional status update are what actually hold under concurrent requests.
"""
import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    PreconditionFailedError,
)
from jobboard.core.security import as_utc, utcnow
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.position import Position
from jobboard.repos import application_repo, portfolio_repo, position_repo
from jobboard.services.profile_service import get_company, get_society

logger = logging.getLogger(__name__)

ALREADY_APPLIED = "You have already applied for this position"


def is_accepting(position: Position, now: datetime) -> bool:
    if not position.is_active:
        return False
    return as_utc(position.submission_start) <= now <= as_utc(position.submission_end)


def apply(
    db: Session,
    user_id: str,
    position_id: str,
    notes: str | None = None,
    portfolio_id: str | None = None,
    now: datetime | None = None,
) -> Application:
    now = now or utcnow()
    society = get_society(db, user_id)

    position = position_repo.get_by_id(db, position_id)
    if not position:
        raise NotFoundError("Position not found")
    # A repeat apply is a conflict whatever else has changed since
    if application_repo.get_for_position_and_society(db, position.id, society.id):
        raise ConflictError(ALREADY_APPLIED)
    if not is_accepting(position, now):
        raise PreconditionFailedError("Position is not accepting applications")

    if portfolio_id:
        portfolio = portfolio_repo.get_for_society(db, portfolio_id, society.id)
        if not portfolio:
            raise NotFoundError("Portfolio not found")
    else:
        portfolio = portfolio_repo.get_latest_for_society(db, society.id)
        if not portfolio:
            raise PreconditionFailedError("Please create your portfolio before applying")

    try:
        application = application_repo.create(db, position.id, society.id, portfolio.id, notes)
    except IntegrityError as e:
        logger.info("Duplicate application rejected by store: position=%s society=%s", position.id, society.id)
        raise ConflictError(ALREADY_APPLIED) from e

    logger.info("Application %s submitted for position=%s", application.id, position.id)
    return application


def decide(
    db: Session,
    user_id: str,
    application_id: str,
    status: ApplicationStatus,
    notes: str | None = None,
) -> Application:
    application = application_repo.get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application not found")
    company = get_company(db, user_id)
    if application.position.company_id != company.id:
        raise ForbiddenError("Not authorized to update this application")
    if status == ApplicationStatus.PENDING:
        raise InvalidTransitionError("Applications can only be accepted or rejected")
    updated = application_repo.set_status_if_pending(db, application.id, status, notes)
    db.refresh(application)
    if not updated:
        raise InvalidTransitionError(f"Application already {application.status}")
    logger.info("Application %s set to %s", application.id, status.value)
    return application


def list_for_position(db: Session, user_id: str, position_id: str) -> list[Application]:
    company = get_company(db, user_id)
    position = position_repo.get_for_company(db, position_id, company.id)
    if not position:
        raise NotFoundError("Position not found")
    return application_repo.list_for_position(db, position.id)


def list_for_company(db: Session, user_id: str) -> list[Application]:
    company = get_company(db, user_id)
    return application_repo.list_for_company(db, company.id)


def list_mine(db: Session, user_id: str) -> list[Application]:
    society = get_society(db, user_id)
    return application_repo.list_for_society(db, society.id)
