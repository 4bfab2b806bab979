import logging
from datetime import datetime

from sqlalchemy.orm import Session

from jobboard.core.security import utcnow
from jobboard.models.position import Position
from jobboard.repos import position_repo
from jobboard.schemas.position import PositionCreate
from jobboard.services.profile_service import get_company

logger = logging.getLogger(__name__)


def create(db: Session, user_id: str, data: PositionCreate) -> Position:
    company = get_company(db, user_id)
    position = position_repo.create(
        db,
        company_id=company.id,
        name=data.name,
        capacity=data.capacity,
        description=data.description,
        submission_start=data.submission_start,
        submission_end=data.submission_end,
    )
    logger.info("Position %s created by company=%s", position.id, company.id)
    return position


def list_public(db: Session, now: datetime | None = None) -> list[Position]:
    return position_repo.list_open(db, now or utcnow())


def list_own(db: Session, user_id: str) -> list[Position]:
    company = get_company(db, user_id)
    return position_repo.list_for_company(db, company.id)
