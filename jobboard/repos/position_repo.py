from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from jobboard.models.position import Position
from jobboard.core.security import generate_id


def create(
    db: Session,
    company_id: str,
    name: str,
    capacity: int,
    description: str,
    submission_start: datetime,
    submission_end: datetime,
) -> Position:
    position = Position(
        id=generate_id(),
        company_id=company_id,
        name=name,
        capacity=capacity,
        description=description,
        submission_start=submission_start,
        submission_end=submission_end,
        is_active=True,
    )
    db.add(position)
    db.commit()
    db.refresh(position)
    return position


def get_by_id(db: Session, position_id: str) -> Position | None:
    return db.query(Position).filter(Position.id == position_id).first()


def get_for_company(db: Session, position_id: str, company_id: str) -> Position | None:
    return (
        db.query(Position)
        .filter(Position.id == position_id, Position.company_id == company_id)
        .first()
    )


def list_open(db: Session, now: datetime) -> list[Position]:
    """Active positions whose submission window has not closed, newest first."""
    return (
        db.query(Position)
        .options(joinedload(Position.company))
        .filter(Position.is_active.is_(True), Position.submission_end >= now)
        .order_by(Position.created_at.desc())
        .all()
    )


def list_for_company(db: Session, company_id: str) -> list[Position]:
    return (
        db.query(Position)
        .options(joinedload(Position.company))
        .filter(Position.company_id == company_id)
        .order_by(Position.created_at.desc())
        .all()
    )
