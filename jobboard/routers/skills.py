import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from jobboard.core.errors import AppError, UpstreamFailureError
from jobboard.database import get_db
from jobboard.dependencies import get_current_identity
from jobboard.schemas.skill import SkillCreate, SkillResponse
from jobboard.services import skill_service
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/skills", tags=["skills"])


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(
    data: SkillCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        return skill_service.create(db, data.name)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Skill create failed for name=%s: %s", data.name, e)
        raise UpstreamFailureError("Failed to create skill") from e


@router.get("", response_model=list[SkillResponse])
def list_skills(
    search: str | None = Query(None, max_length=50),
    db: Session = Depends(get_db),
):
    return skill_service.search(db, search)
