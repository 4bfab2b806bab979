from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from jobboard.core.security import as_utc
from jobboard.schemas.profile import CompanySummary

MAX_CAPACITY = 10_000


class PositionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    capacity: int = Field(ge=1, le=MAX_CAPACITY)
    description: str = Field(min_length=1, max_length=10000)
    submission_start: datetime
    submission_end: datetime

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("submission_start", "submission_end")
    @classmethod
    def to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @model_validator(mode="after")
    def window_order(self):
        if self.submission_end <= self.submission_start:
            raise ValueError("End date must be after start date")
        return self


class PositionResponse(BaseModel):
    id: str
    company_id: str
    name: str
    capacity: int
    description: str
    submission_start: datetime
    submission_end: datetime
    is_active: bool
    created_at: datetime | None = None
    company: CompanySummary | None = None

    normalize_utc = field_validator("submission_start", "submission_end", "created_at")(as_utc)

    class Config:
        from_attributes = True


class PositionSummary(BaseModel):
    id: str
    name: str
    submission_end: datetime
    company: CompanySummary | None = None

    normalize_utc = field_validator("submission_end")(as_utc)

    class Config:
        from_attributes = True
