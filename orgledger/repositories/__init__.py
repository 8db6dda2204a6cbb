"""Data access repositories."""

from orgledger.repositories.base import BaseRepository
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.repositories.sale_repo import SaleRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "DepartmentRepository",
    "EmployeeRepository",
    "SaleRepository",
]
