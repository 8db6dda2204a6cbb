"""Department schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from orgledger.schemas.company import NameValidator


class DepartmentCreate(BaseModel):
    name: str = Field(max_length=200, examples=["Marketing"])
    code: Optional[str] = Field(default=None, max_length=20, examples=["D004"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return NameValidator.validate_name(v)


class Department(BaseModel):
    id: int
    code: Optional[str] = None
    name: str
    company_id: int

    model_config = {"from_attributes": True}
