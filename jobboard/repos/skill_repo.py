from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.models.skill import Skill
from jobboard.core.security import generate_id


def get_by_name_ci(db: Session, name: str) -> Skill | None:
    return db.query(Skill).filter(func.lower(Skill.name) == name.lower()).first()


def create(db: Session, name: str) -> Skill:
    skill = Skill(id=generate_id(), name=name)
    db.add(skill)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(skill)
    return skill


def search(db: Session, term: str | None = None) -> list[Skill]:
    q = db.query(Skill)
    if term and term.strip():
        # Wildcards in the search term match literally
        escaped = term.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        q = q.filter(Skill.name.ilike(f"%{escaped}%", escape="\\"))
    return q.order_by(Skill.name.asc()).all()
