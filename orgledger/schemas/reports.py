"""Report schemas returned by the aggregation queries.

Amounts are carried unrounded; ``*_display`` fields hold the two-decimal
presentation strings.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class RosterEntry(BaseModel):
    employee_id: int
    name: str
    role: str


class DepartmentRoster(BaseModel):
    """Employees of one department, ordered by name."""

    department_id: int
    department: str
    has_employees: bool
    employees: List[RosterEntry] = []


class EmployeeSalesTotal(BaseModel):
    employee_id: int
    employee: str
    role: str
    department: Optional[str] = None
    sale_count: int = 0
    total_sales: float = 0.0


class TopSalesperson(BaseModel):
    """Best seller of one department; ``employee`` is None when it has no employees."""

    department_id: int
    department: str
    employee_id: Optional[int] = None
    employee: Optional[str] = None
    total_sales: Optional[float] = None

    @property
    def has_employees(self) -> bool:
        return self.employee_id is not None


class DepartmentHeadcount(BaseModel):
    department_id: int
    department: str
    employee_count: int


class RankedSale(BaseModel):
    sale_id: int
    code: Optional[str] = None
    amount: float
    date: datetime.date
    employee: Optional[str] = None
    department: Optional[str] = None


class LeaderboardRow(RankedSale):
    rank: int
    is_podium: bool
    amount_display: str
    date_display: str


class SalesLeaderboard(BaseModel):
    rows: List[LeaderboardRow] = []
    sale_count: int = 0
    total_value: float = 0.0
    mean_value: float = 0.0
    total_display: str
    mean_display: str


class EmployeeSearchCriteria(BaseModel):
    """Filter for the department + sales-threshold employee search."""

    departments: List[str] = Field(default_factory=list)
    min_total: float = 0.0
    limit: int = Field(default=10, ge=0)


class CompanyReport(BaseModel):
    """Every aggregation query for one company, in one bundle."""

    company_id: int
    company: str
    rosters: List[DepartmentRoster]
    sales_per_employee: List[EmployeeSalesTotal]
    top_salespeople: List[TopSalesperson]
    employees_without_sales: List[EmployeeSalesTotal]
    headcount: List[DepartmentHeadcount]
    top_sales: List[RankedSale]
    leaderboard: SalesLeaderboard
