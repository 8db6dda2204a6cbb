"""Employee schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from orgledger.schemas.company import NameValidator


class EmployeeCreate(BaseModel):
    name: str = Field(max_length=200, examples=["Frank Ocean"])
    role: str = Field(max_length=200, examples=["Marketing Lead"])
    code: Optional[str] = Field(default=None, max_length=20, examples=["E006"])

    @field_validator("name", "role")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return NameValidator.validate_name(v)


class EmployeeUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(default=None, max_length=200)
    role: Optional[str] = Field(default=None, max_length=200)

    @field_validator("name", "role")
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return NameValidator.validate_name(v)


class EmployeeMove(BaseModel):
    department_id: int


class Employee(BaseModel):
    id: int
    code: Optional[str] = None
    name: str
    role: str
    department_id: Optional[int] = None

    model_config = {"from_attributes": True}
