import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.core.errors import AppError, UpstreamFailureError
from jobboard.database import get_db
from jobboard.dependencies import get_current_employer, get_current_seeker
from jobboard.models.application import ApplicationStatus
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationDecision,
    ApplicationList,
    ApplicationResponse,
)
from jobboard.schemas.position import PositionCreate, PositionResponse
from jobboard.services import application_service, position_service
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/positions", tags=["positions"])


def _as_list(applications) -> ApplicationList:
    data = [ApplicationResponse.model_validate(a) for a in applications]
    return ApplicationList(count=len(data), data=data)


@router.post("", response_model=PositionResponse, status_code=status.HTTP_201_CREATED)
def create_position(
    data: PositionCreate,
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    try:
        return position_service.create(db, identity.user_id, data)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Position create failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to create position") from e


@router.get("", response_model=list[PositionResponse])
def list_positions(db: Session = Depends(get_db)):
    """Open positions, newest first."""
    return position_service.list_public(db)


# Static paths first so they are not captured by /{position_id}
@router.get("/company", response_model=list[PositionResponse])
def list_company_positions(
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    return position_service.list_own(db, identity.user_id)


@router.get("/company/applications", response_model=ApplicationList)
def list_company_applications(
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    return _as_list(application_service.list_for_company(db, identity.user_id))


@router.get("/my-applications", response_model=ApplicationList)
def list_my_applications(
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
):
    return _as_list(application_service.list_mine(db, identity.user_id))


@router.put("/applications/{application_id}", response_model=ApplicationResponse)
def decide_application(
    application_id: str,
    data: ApplicationDecision,
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    try:
        return application_service.decide(
            db, identity.user_id, application_id, ApplicationStatus(data.status), data.notes
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Application decision failed for id=%s: %s", application_id, e)
        raise UpstreamFailureError("Failed to update application") from e


@router.post("/{position_id}/apply", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def apply_for_position(
    position_id: str,
    data: ApplicationCreate | None = None,
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
):
    data = data or ApplicationCreate()
    try:
        return application_service.apply(
            db, identity.user_id, position_id, notes=data.notes, portfolio_id=data.portfolio_id
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Apply failed for position=%s: %s", position_id, e)
        raise UpstreamFailureError("Failed to submit application") from e


@router.get("/{position_id}/applications", response_model=ApplicationList)
def list_position_applications(
    position_id: str,
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    return _as_list(application_service.list_for_position(db, identity.user_id, position_id))
