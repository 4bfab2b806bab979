from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.models.user import User, UserRole
from jobboard.core.security import hash_password, generate_id


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create(db: Session, name: str, email: str, password: str, role: UserRole) -> User:
    """Insert a user; re-raises IntegrityError (duplicate email) after rolling back."""
    user = User(
        id=generate_id(),
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role.value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: str) -> bool:
    """Delete user and its profile (via cascade). Returns True if deleted."""
    user = get_by_id(db, user_id)
    if not user:
        return False
    db.delete(user)
    db.commit()
    return True
