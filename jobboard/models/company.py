from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class Company(Base):
    """Employer (HRD) profile, one per employer user."""

    __tablename__ = "companies"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    name = Column(String, nullable=False, default="")
    address = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    logo_url = Column(String, nullable=False, default="")
    is_profile_complete = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="company")
    positions = relationship("Position", back_populates="company", cascade="all, delete-orphan")
