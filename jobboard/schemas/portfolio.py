import json
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def parse_skills(raw: str | list[str] | None) -> list[str] | None:
    """Accept a JSON array or a comma-separated string; trims, drops blanks, dedupes in order."""
    if raw is None:
        return None
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = raw.split(",")
        if isinstance(parsed, str):
            parsed = parsed.split(",")
        if not isinstance(parsed, list):
            raise ValueError("skills must be a list or a comma-separated string")
        raw = parsed
    skills: list[str] = []
    for s in raw:
        s = str(s).strip()
        if s and s not in skills:
            skills.append(s)
    return skills


class PortfolioCreate(BaseModel):
    # All three fields are mandatory on creation; the file arrives separately.
    skills: list[str] = Field(min_length=1)
    description: str = Field(max_length=5000)

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v):
        return parse_skills(v)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Description is required")
        return v


class PortfolioUpdate(BaseModel):
    skills: list[str] | None = None
    description: str | None = Field(default=None, max_length=5000)

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v):
        v = parse_skills(v)
        if v is not None and not v:
            raise ValueError("skills must not be empty")
        return v

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("description must not be blank")
        return v


class PortfolioResponse(BaseModel):
    id: str
    skills: list[str]
    description: str
    file_url: str
    file_name: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
