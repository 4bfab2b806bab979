import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import ConflictError
from jobboard.models.skill import Skill
from jobboard.repos import skill_repo

logger = logging.getLogger(__name__)


def create(db: Session, name: str) -> Skill:
    # Duplicates are matched case-insensitively; the unique index backs the exact match.
    if skill_repo.get_by_name_ci(db, name):
        raise ConflictError("Skill already exists")
    try:
        skill = skill_repo.create(db, name)
    except IntegrityError as e:
        raise ConflictError("Skill already exists") from e
    logger.info("Skill created: %s", skill.name)
    return skill


def search(db: Session, term: str | None = None) -> list[Skill]:
    return skill_repo.search(db, term)
