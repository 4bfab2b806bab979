from sqlalchemy.orm import Session

from jobboard.models.portfolio import Portfolio
from jobboard.core.security import generate_id

PORTFOLIO_FIELDS = {"skills", "description", "file_url"}


def create(db: Session, society_id: str, skills: list[str], description: str, file_url: str) -> Portfolio:
    item = Portfolio(
        id=generate_id(),
        society_id=society_id,
        skills=skills,
        description=description,
        file_url=file_url,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def list_for_society(db: Session, society_id: str) -> list[Portfolio]:
    return (
        db.query(Portfolio)
        .filter(Portfolio.society_id == society_id)
        .order_by(Portfolio.created_at.desc())
        .all()
    )


def get_latest_for_society(db: Session, society_id: str) -> Portfolio | None:
    return (
        db.query(Portfolio)
        .filter(Portfolio.society_id == society_id)
        .order_by(Portfolio.created_at.desc())
        .first()
    )


def get_for_society(db: Session, portfolio_id: str, society_id: str) -> Portfolio | None:
    return (
        db.query(Portfolio)
        .filter(Portfolio.id == portfolio_id, Portfolio.society_id == society_id)
        .first()
    )


def update(db: Session, item: Portfolio, changes: dict) -> Portfolio:
    unknown = set(changes) - PORTFOLIO_FIELDS
    if unknown:
        raise ValueError(f"Unknown portfolio fields: {', '.join(sorted(unknown))}")
    for field, value in changes.items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


def delete(db: Session, item: Portfolio) -> None:
    db.delete(item)
    db.commit()
