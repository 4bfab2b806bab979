import enum

from sqlalchemy import Column, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class ApplicationStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class Application(Base):
    __tablename__ = "applications"
    # One application per seeker per position; the store enforces it, not the pre-check.
    __table_args__ = (
        UniqueConstraint("position_id", "society_id", name="uq_applications_position_society"),
    )

    id = Column(String, primary_key=True, index=True)
    position_id = Column(String, ForeignKey("positions.id", ondelete="CASCADE"), nullable=False, index=True)
    society_id = Column(String, ForeignKey("societies.id", ondelete="CASCADE"), nullable=False, index=True)
    portfolio_id = Column(String, ForeignKey("portfolios.id", ondelete="SET NULL"), nullable=True)
    status = Column(String, nullable=False, default=ApplicationStatus.PENDING.value)
    notes = Column(Text, nullable=True)
    applied_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    position = relationship("Position", back_populates="applications")
    society = relationship("Society", back_populates="applications")
    portfolio = relationship("Portfolio")
