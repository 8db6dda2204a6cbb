"""Company schemas."""

from pydantic import BaseModel, Field, field_validator


class NameValidator:
    """Common validator for entity names."""

    @staticmethod
    def validate_name(v: str) -> str:
        """Strip whitespace and reject empty names.

        Raises:
            ValueError: If the name is blank.
        """
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty")
        return v


class CompanyBase(BaseModel):
    name: str = Field(max_length=200, examples=["Acme Inc."])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return NameValidator.validate_name(v)


class CompanyCreate(CompanyBase):
    pass


class Company(CompanyBase):
    id: int

    model_config = {"from_attributes": True}


class CompanyWithStats(Company):
    """Company with aggregate headcount and sales figures."""

    department_count: int = 0
    employee_count: int = 0
    sale_count: int = 0
    total_sales: float = 0.0
