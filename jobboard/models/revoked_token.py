from sqlalchemy import Column, String, DateTime, Text

from jobboard.database import Base


class RevokedToken(Base):
    """Logged-out bearer tokens. expires_at matches the token's own exp claim."""

    __tablename__ = "revoked_tokens"

    id = Column(String, primary_key=True, index=True)
    token = Column(Text, unique=True, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
