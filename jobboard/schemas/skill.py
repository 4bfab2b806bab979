from pydantic import BaseModel, Field, field_validator


class SkillCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Skill name is required")
        return v


class SkillResponse(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True
