"""Sale schemas."""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SaleCreate(BaseModel):
    # Sign is checked by OrgService so API and in-process callers share one rule.
    amount: float = Field(examples=[15000.0])
    date: datetime.date = Field(examples=["2025-02-01"])
    code: Optional[str] = Field(default=None, max_length=20, examples=["S006"])


class Sale(BaseModel):
    id: int
    code: Optional[str] = None
    amount: float
    date: datetime.date
    employee_id: Optional[int] = None

    model_config = {"from_attributes": True}
