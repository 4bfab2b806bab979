from sqlalchemy import Column, String, DateTime

from jobboard.core.security import utcnow
from jobboard.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(String, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
