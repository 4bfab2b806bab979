import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from jobboard.core.errors import AppError, UpstreamFailureError
from jobboard.database import get_db
from jobboard.dependencies import get_current_employer
from jobboard.schemas.forms import parse_form
from jobboard.schemas.profile import CompanyProfileUpdate, CompanyResponse
from jobboard.services import profile_service
from jobboard.services.blob_store import BlobStore, get_blob_store, read_upload
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("/me", response_model=CompanyResponse)
def get_my_company(
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
):
    return profile_service.get_company(db, identity.user_id)


@router.put("/me", response_model=CompanyResponse)
def update_my_company(
    name: str | None = Form(None),
    address: str | None = Form(None),
    phone: str | None = Form(None),
    description: str | None = Form(None),
    logo: UploadFile | None = File(None),
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    """Partial update: only the form fields sent are changed."""
    data = parse_form(
        CompanyProfileUpdate,
        name=name,
        address=address,
        phone=phone,
        description=description,
    )
    logo_payload = read_upload(logo, image_only=True)
    try:
        return profile_service.update_company(db, store, identity.user_id, data, logo_payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Company update failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to update profile") from e
