from sqlalchemy import Column, String, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship

from jobboard.core.security import utcnow
from jobboard.database import Base


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(String, primary_key=True, index=True)
    society_id = Column(String, ForeignKey("societies.id", ondelete="CASCADE"), nullable=False, index=True)
    skills = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=False, default="")
    file_url = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    society = relationship("Society", back_populates="portfolios")

    @property
    def file_name(self) -> str | None:
        return self.file_url.rsplit("/", 1)[-1] if self.file_url else None
