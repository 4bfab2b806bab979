import logging

from sqlalchemy.orm import Session

from jobboard.core.errors import NotFoundError
from jobboard.models.company import Company
from jobboard.models.society import Society
from jobboard.repos import profile_repo
from jobboard.schemas.profile import (
    CompanyProfileComplete,
    CompanyProfileUpdate,
    SocietyProfileComplete,
    SocietyProfileUpdate,
)
from jobboard.services.blob_store import BlobPayload, BlobStore, store_payload

logger = logging.getLogger(__name__)

LOGO_FOLDER = "company_logos"
PHOTO_FOLDER = "profile_photos"


def get_company(db: Session, user_id: str) -> Company:
    company = profile_repo.get_company_by_user(db, user_id)
    if not company:
        raise NotFoundError("Company profile not found")
    return company


def get_society(db: Session, user_id: str) -> Society:
    society = profile_repo.get_society_by_user(db, user_id)
    if not society:
        raise NotFoundError("Society profile not found")
    return society


def _save_with_asset(db, store, profile, changes, asset, asset_field, folder, update):
    """
    Upload the new asset first, persist only its URL, then release the superseded
    blob. A failed write releases the freshly uploaded blob instead.
    """
    old_url = getattr(profile, asset_field)
    new_url = None
    if asset is not None:
        new_url = store_payload(store, asset, folder, profile.user_id)
        changes[asset_field] = new_url
    try:
        profile = update(db, profile, changes)
    except Exception:
        db.rollback()
        if new_url:
            store.delete(new_url)
        raise
    if new_url and old_url and old_url != new_url:
        store.delete(old_url)
    return profile


def complete_company(
    db: Session,
    store: BlobStore,
    user_id: str,
    data: CompanyProfileComplete,
    logo: BlobPayload | None = None,
) -> Company:
    company = get_company(db, user_id)
    changes = data.model_dump()
    changes["is_profile_complete"] = True
    company = _save_with_asset(db, store, company, changes, logo, "logo_url", LOGO_FOLDER, profile_repo.update_company)
    logger.info("Company profile completed for user=%s", user_id)
    return company


def update_company(
    db: Session,
    store: BlobStore,
    user_id: str,
    data: CompanyProfileUpdate,
    logo: BlobPayload | None = None,
) -> Company:
    company = get_company(db, user_id)
    changes = data.model_dump(exclude_unset=True)
    return _save_with_asset(db, store, company, changes, logo, "logo_url", LOGO_FOLDER, profile_repo.update_company)


def complete_society(
    db: Session,
    store: BlobStore,
    user_id: str,
    data: SocietyProfileComplete,
    photo: BlobPayload | None = None,
) -> Society:
    society = get_society(db, user_id)
    changes = data.model_dump()
    changes["is_profile_complete"] = True
    society = _save_with_asset(db, store, society, changes, photo, "photo_url", PHOTO_FOLDER, profile_repo.update_society)
    logger.info("Society profile completed for user=%s", user_id)
    return society


def update_society(
    db: Session,
    store: BlobStore,
    user_id: str,
    data: SocietyProfileUpdate,
    photo: BlobPayload | None = None,
) -> Society:
    society = get_society(db, user_id)
    changes = data.model_dump(exclude_unset=True)
    return _save_with_asset(db, store, society, changes, photo, "photo_url", PHOTO_FOLDER, profile_repo.update_society)
