import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from jobboard.core.errors import AppError, UpstreamFailureError
from jobboard.database import get_db
from jobboard.dependencies import (
    get_bearer_token,
    get_current_employer,
    get_current_identity,
    get_current_seeker,
)
from jobboard.models.user import User
from jobboard.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from jobboard.schemas.forms import parse_form
from jobboard.schemas.profile import (
    CompanyProfileComplete,
    CompanyResponse,
    SocietyProfileComplete,
    SocietyResponse,
)
from jobboard.services import auth_service, profile_service
from jobboard.services.blob_store import BlobStore, get_blob_store, read_upload
from jobboard.services.token_service import Identity

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _user_to_response(user: User, is_profile_complete: bool) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        is_profile_complete=is_profile_complete,
    )


def _token_response(result: auth_service.AuthResult) -> Token:
    return Token(
        access_token=result.token,
        expires_at=result.expires_at,
        user=_user_to_response(result.user, result.is_profile_complete),
        is_profile_complete=result.is_profile_complete,
    )


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(data: UserRegister, db: Session = Depends(get_db)):
    try:
        result = auth_service.register(db, data.name, data.email, data.password, data.role)
        return _token_response(result)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise UpstreamFailureError("Registration failed") from e


@router.post("/login", response_model=Token)
def login(data: UserLogin, db: Session = Depends(get_db)):
    try:
        return _token_response(auth_service.login(db, data.email, data.password))
    except AppError:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise UpstreamFailureError("Login failed") from e


@router.post("/logout")
def logout(
    token: str = Depends(get_bearer_token),
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        auth_service.logout(db, token, identity)
        return {"message": "Logged out successfully"}
    except AppError:
        raise
    except Exception as e:
        logger.exception("Logout failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Logout failed") from e


@router.get("/me", response_model=UserResponse)
def get_me(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    user, complete = auth_service.current_user(db, identity)
    return _user_to_response(user, complete)


@router.post("/complete-society-profile", response_model=SocietyResponse)
def complete_society_profile(
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
        SocietyProfileComplete,
        name=name,
        address=address,
        phone=phone,
        date_of_birth=date_of_birth,
        gender=gender,
    )
    photo = read_upload(profile_photo, image_only=True)
    try:
        return profile_service.complete_society(db, store, identity.user_id, data, photo)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Society profile completion failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to complete profile") from e


@router.post("/complete-hrd-profile", response_model=CompanyResponse)
def complete_hrd_profile(
    name: str | None = Form(None),
    address: str | None = Form(None),
    phone: str | None = Form(None),
    description: str | None = Form(None),
    logo: UploadFile | None = File(None),
    identity: Identity = Depends(get_current_employer),
    db: Session = Depends(get_db),
    store: BlobStore = Depends(get_blob_store),
):
    data = parse_form(
        CompanyProfileComplete,
        name=name,
        address=address,
        phone=phone,
        description=description,
    )
    logo_payload = read_upload(logo, image_only=True)
    try:
        return profile_service.complete_company(db, store, identity.user_id, data, logo_payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Company profile completion failed for user=%s: %s", identity.user_id, e)
        raise UpstreamFailureError("Failed to complete profile") from e
