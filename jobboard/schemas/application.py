from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from jobboard.core.security import as_utc
from jobboard.models.application import ApplicationStatus
from jobboard.schemas.portfolio import PortfolioResponse
from jobboard.schemas.position import PositionSummary
from jobboard.schemas.profile import SocietySummary


class ApplicationCreate(BaseModel):
    notes: str | None = Field(default=None, max_length=2000)
    # Defaults to the seeker's most recent portfolio item
    portfolio_id: str | None = None


class ApplicationDecision(BaseModel):
    status: Literal["ACCEPTED", "REJECTED"]
    notes: str | None = Field(default=None, max_length=2000)


class ApplicationResponse(BaseModel):
    id: str
    position_id: str
    society_id: str
    portfolio_id: str | None
    status: ApplicationStatus
    notes: str | None = None
    applied_at: datetime | None = None
    position: PositionSummary | None = None
    society: SocietySummary | None = None
    portfolio: PortfolioResponse | None = None

    normalize_utc = field_validator("applied_at")(as_utc)

    class Config:
        from_attributes = True


class ApplicationList(BaseModel):
    count: int
    data: list[ApplicationResponse]
