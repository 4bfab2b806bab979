import enum

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class UserRole(str, enum.Enum):
    EMPLOYER = "HRD"
    SEEKER = "Society"


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    # Stores UserRole values; never changes after registration
    role = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    company = relationship("Company", back_populates="user", uselist=False, cascade="all, delete-orphan")
    society = relationship("Society", back_populates="user", uselist=False, cascade="all, delete-orphan")
