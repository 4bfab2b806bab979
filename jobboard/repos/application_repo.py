from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.position import Position
from jobboard.core.security import generate_id, utcnow


def get_for_position_and_society(db: Session, position_id: str, society_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(
            Application.position_id == position_id,
            Application.society_id == society_id,
        )
        .first()
    )


def create(
    db: Session,
    position_id: str,
    society_id: str,
    portfolio_id: str,
    notes: str | None = None,
) -> Application:
    """Insert a PENDING application; re-raises IntegrityError on a duplicate pair after rolling back."""
    application = Application(
        id=generate_id(),
        position_id=position_id,
        society_id=society_id,
        portfolio_id=portfolio_id,
        status=ApplicationStatus.PENDING.value,
        notes=notes,
        applied_at=utcnow(),
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(joinedload(Application.position))
        .filter(Application.id == application_id)
        .first()
    )


def set_status_if_pending(
    db: Session,
    application_id: str,
    status: ApplicationStatus,
    notes: str | None = None,
) -> bool:
    """Conditional PENDING -> status update. Returns False if the row was no longer PENDING."""
    values = {Application.status: status.value, Application.updated_at: utcnow()}
    if notes is not None:
        values[Application.notes] = notes
    count = (
        db.query(Application)
        .filter(
            Application.id == application_id,
            Application.status == ApplicationStatus.PENDING.value,
        )
        .update(values, synchronize_session=False)
    )
    db.commit()
    return count == 1


def _with_relations(q):
    return q.options(
        joinedload(Application.position).joinedload(Position.company),
        joinedload(Application.society),
        joinedload(Application.portfolio),
    )


def list_for_position(db: Session, position_id: str) -> list[Application]:
    q = db.query(Application).filter(Application.position_id == position_id)
    return _with_relations(q).order_by(Application.applied_at.desc()).all()


def list_for_company(db: Session, company_id: str) -> list[Application]:
    q = (
        db.query(Application)
        .join(Position, Application.position_id == Position.id)
        .filter(Position.company_id == company_id)
    )
    return _with_relations(q).order_by(Application.applied_at.desc()).all()


def list_for_society(db: Session, society_id: str) -> list[Application]:
    q = db.query(Application).filter(Application.society_id == society_id)
    return _with_relations(q).order_by(Application.applied_at.desc()).all()
