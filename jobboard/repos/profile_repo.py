from sqlalchemy.orm import Session

from jobboard.models.company import Company
from jobboard.models.society import Society
from jobboard.core.security import generate_id

COMPANY_FIELDS = {"name", "address", "phone", "description", "logo_url", "is_profile_complete"}
SOCIETY_FIELDS = {"name", "address", "phone", "date_of_birth", "gender", "photo_url", "is_profile_complete"}


def create_company(db: Session, user_id: str) -> Company:
    company = Company(id=generate_id(), user_id=user_id)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def create_society(db: Session, user_id: str) -> Society:
    society = Society(id=generate_id(), user_id=user_id)
    db.add(society)
    db.commit()
    db.refresh(society)
    return society


def get_company_by_user(db: Session, user_id: str) -> Company | None:
    return db.query(Company).filter(Company.user_id == user_id).first()


def get_society_by_user(db: Session, user_id: str) -> Society | None:
    return db.query(Society).filter(Society.user_id == user_id).first()


def _apply(db: Session, profile, changes: dict, allowed: set[str]):
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")
    for field, value in changes.items():
        setattr(profile, field, value)
    db.commit()
    db.refresh(profile)
    return profile


def update_company(db: Session, company: Company, changes: dict) -> Company:
    return _apply(db, company, changes, COMPANY_FIELDS)


def update_society(db: Session, society: Society, changes: dict) -> Society:
    return _apply(db, society, changes, SOCIETY_FIELDS)
