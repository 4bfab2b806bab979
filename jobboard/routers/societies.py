import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from jobboard.core.errors import AppError, UpstreamFailureError
from jobboard.database import get_db
from jobboard.dependencies import get_current_seeker
from jobboard.schemas.forms import parse_form
from jobboard.schemas.portfolio import PortfolioCreate, PortfolioResponse, PortfolioUpdate
from jobboard.schemas.profile import SocietyProfileUpdate, SocietyResponse
from jobboard.services import portfolio_service, profile_service
from jobboard.services.blob_store import BlobStore, get_blob_store, read_upload
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/societies", tags=["societies"])


@router.get("/me", response_model=SocietyResponse)
def get_my_profile(
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
):
    return profile_service.get_society(db, identity.user_id)


@router.put("/me", response_model=SocietyResponse)
def update_my_profile(
    name: str | None = Form(None),
    address: str | None = Form(None),
    phone: str | None = Form(None),
    date_of_birth: str | None = Form(None),
    gender: str | None = Form(None),
    profile_photo: UploadFile | None = File(None),
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    data = parse_form(
        SocietyProfileUpdate,
        name=name,
        address=address,
        phone=phone,
        date_of_birth=date_of_birth,
        gender=gender,
    )
    photo = read_upload(profile_photo, image_only=True)
    try:
        return profile_service.update_society(db, store, identity.user_id, data, photo)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Society update failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to update profile") from e


@router.post("/portfolio", response_model=PortfolioResponse, status_code=status.HTTP_201_CREATED)
def create_portfolio(
    skills: str | None = Form(None),
    description: str | None = Form(None),
    file: UploadFile | None = File(None),
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """Skills as a JSON array or comma-separated list; skills, description and file are all required."""
    data = parse_form(PortfolioCreate, skills=skills, description=description)
    payload = read_upload(file)
    try:
        return portfolio_service.create(db, store, identity.user_id, data, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Portfolio create failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to create portfolio") from e


@router.get("/portfolio", response_model=list[PortfolioResponse])
def list_portfolio(
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
):
    return portfolio_service.list_own(db, identity.user_id)


@router.put("/portfolio/{portfolio_id}", response_model=PortfolioResponse)
def update_portfolio(
    portfolio_id: str,
    skills: str | None = Form(None),
    description: str | None = Form(None),
    file: UploadFile | None = File(None),
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    data = parse_form(PortfolioUpdate, skills=skills, description=description)
    payload = read_upload(file)
    try:
        return portfolio_service.update(db, store, identity.user_id, portfolio_id, data, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Portfolio update failed for id=%s: %s", portfolio_id, e)
        raise UpstreamFailureError("Failed to update portfolio") from e


@router.delete("/portfolio/{portfolio_id}")
def delete_portfolio(
    portfolio_id: str,
    identity: Identity = Depends(get_current_seeker),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    try:
        portfolio_service.delete(db, store, identity.user_id, portfolio_id)
        return {"message": "Portfolio deleted"}
    except AppError:
        raise
    except Exception as e:
        logger.exception("Portfolio delete failed for id=%s: %s", portfolio_id, e)
        raise UpstreamFailureError("Failed to delete portfolio") from e
