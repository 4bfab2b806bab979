import enum

from sqlalchemy import Column, String, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class Gender(str, enum.Enum):
    UNSET = ""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Society(Base):
    """Job-seeker profile, one per seeker user."""

    __tablename__ = "societies"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    name = Column(String, nullable=False, default="")
    address = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    date_of_birth = Column(Date, nullable=True)
    gender = Column(String, nullable=False, default=Gender.UNSET.value)
    photo_url = Column(String, nullable=False, default="")
    is_profile_complete = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="society")
    portfolios = relationship("Portfolio", back_populates="society", cascade="all, delete-orphan")
    applications = relationship("Application", back_populates="society", cascade="all, delete-orphan")
