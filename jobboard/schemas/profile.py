from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

GenderValue = Literal["Male", "Female", "Other"]


def _not_blank(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class CompanyProfileComplete(BaseModel):
    name: str = Field(max_length=200)
    address: str = Field(max_length=500)
    phone: str = Field(max_length=50)
    description: str = Field(default="", max_length=5000)

    check_required = field_validator("name", "address", "phone")(_not_blank)

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str) -> str:
        return v.strip()


class CompanyProfileUpdate(BaseModel):
    """
    Partial update: only fields the client sent are applied. Blank name, address
    or phone is rejected; description is optional, so a blank one clears it.
    """

    name: str | None = Field(default=None, max_length=200)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=5000)

    check_present = field_validator("name", "address", "phone")(_not_blank)

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v


class SocietyProfileComplete(BaseModel):
    name: str = Field(max_length=200)
    address: str = Field(max_length=500)
    phone: str = Field(max_length=50)
    date_of_birth: date
    gender: GenderValue

    check_required = field_validator("name", "address", "phone")(_not_blank)


class SocietyProfileUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=50)
    date_of_birth: date | None = None
    gender: GenderValue | None = None

    check_present = field_validator("name", "address", "phone")(_not_blank)


class CompanyResponse(BaseModel):
    id: str
    user_id: str
    name: str
    address: str
    phone: str
    description: str
    logo_url: str
    is_profile_complete: bool
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class CompanySummary(BaseModel):
    id: str
    name: str
    address: str
    logo_url: str

    class Config:
        from_attributes = True


class SocietyResponse(BaseModel):
    id: str
    user_id: str
    name: str
    address: str
    phone: str
    date_of_birth: date | None
    gender: str
    photo_url: str
    is_profile_complete: bool
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class SocietySummary(BaseModel):
    id: str
    name: str
    phone: str
    photo_url: str

    class Config:
        from_attributes = True
