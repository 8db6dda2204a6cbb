"""Pydantic schemas for request/response validation and report types."""

from orgledger.schemas.company import Company, CompanyCreate, CompanyWithStats
from orgledger.schemas.department import Department, DepartmentCreate
from orgledger.schemas.employee import Employee, EmployeeCreate, EmployeeMove, EmployeeUpdate
from orgledger.schemas.reports import (
    CompanyReport,
    DepartmentHeadcount,
    DepartmentRoster,
    EmployeeSalesTotal,
    EmployeeSearchCriteria,
    LeaderboardRow,
    RankedSale,
    RosterEntry,
    SalesLeaderboard,
    TopSalesperson,
)
from orgledger.schemas.sale import Sale, SaleCreate

__all__ = [
    "Company", "CompanyCreate", "CompanyWithStats",
    "Department", "DepartmentCreate",
    "Employee", "EmployeeCreate", "EmployeeMove", "EmployeeUpdate",
    "Sale", "SaleCreate",
    "RosterEntry", "DepartmentRoster", "EmployeeSalesTotal", "TopSalesperson",
    "DepartmentHeadcount", "RankedSale", "LeaderboardRow", "SalesLeaderboard",
    "EmployeeSearchCriteria", "CompanyReport",
]
