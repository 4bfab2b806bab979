from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Text, CheckConstraint, Index
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class Position(Base):
    """Job opening posted by a company, open for applications within its submission window."""

    __tablename__ = "positions"
    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_positions_capacity_positive"),
        CheckConstraint("submission_end > submission_start", name="ck_positions_window_order"),
        Index("ix_positions_company_active", "company_id", "is_active"),
    )

    id = Column(String, primary_key=True, index=True)
    company_id = Column(String, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    capacity = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)
    submission_start = Column(DateTime(timezone=True), nullable=False)
    submission_end = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    company = relationship("Company", back_populates="positions")
    applications = relationship("Application", back_populates="position", cascade="all, delete-orphan")
