import logging

from sqlalchemy.orm import Session

from jobboard.core.errors import NotFoundError, ValidationError
from jobboard.models.portfolio import Portfolio
from jobboard.repos import portfolio_repo
from jobboard.schemas.portfolio import PortfolioCreate, PortfolioUpdate
from jobboard.services.blob_store import BlobPayload, BlobStore, store_payload
from jobboard.services.profile_service import get_society

logger = logging.getLogger(__name__)

PORTFOLIO_FOLDER = "portfolios"


def create(
    db: Session,
    store: BlobStore,
    user_id: str,
    data: PortfolioCreate,
    file: BlobPayload | None,
) -> Portfolio:
    if file is None:
        raise ValidationError("file: Portfolio file is required")
    society = get_society(db, user_id)
    file_url = store_payload(store, file, PORTFOLIO_FOLDER, society.id)
    try:
        item = portfolio_repo.create(db, society.id, data.skills, data.description, file_url)
    except Exception:
        db.rollback()
        store.delete(file_url)
        raise
    logger.info("Portfolio %s created for society=%s", item.id, society.id)
    return item


def list_own(db: Session, user_id: str) -> list[Portfolio]:
    society = get_society(db, user_id)
    return portfolio_repo.list_for_society(db, society.id)


def _get_owned(db: Session, user_id: str, portfolio_id: str) -> Portfolio:
    society = get_society(db, user_id)
    item = portfolio_repo.get_for_society(db, portfolio_id, society.id)
    if not item:
        raise NotFoundError("Portfolio not found")
    return item


def update(
    db: Session,
    store: BlobStore,
    user_id: str,
    portfolio_id: str,
    data: PortfolioUpdate,
    file: BlobPayload | None = None,
) -> Portfolio:
    item = _get_owned(db, user_id, portfolio_id)
    changes = data.model_dump(exclude_unset=True)
    old_url = item.file_url
    new_url = None
    if file is not None:
        new_url = store_payload(store, file, PORTFOLIO_FOLDER, item.society_id)
        changes["file_url"] = new_url
    try:
        item = portfolio_repo.update(db, item, changes)
    except Exception:
        db.rollback()
        if new_url:
            store.delete(new_url)
        raise
    if new_url and old_url:
        store.delete(old_url)
    return item


def delete(db: Session, store: BlobStore, user_id: str, portfolio_id: str) -> None:
    item = _get_owned(db, user_id, portfolio_id)
    file_url = item.file_url
    portfolio_repo.delete(db, item)
    if file_url:
        store.delete(file_url)
    logger.info("Portfolio %s deleted", portfolio_id)
