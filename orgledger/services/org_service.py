"""Mutations and lookups on the Company → Department → Employee → Sale graph.

Every mutation attaches children through the parent's collection so both
sides of the relationship change together, then commits. On any failure the
session is rolled back and the typed error propagates to the caller.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from orgledger.domain.errors import DanglingOwnerError, DuplicateCodeError, NotFoundError
from orgledger.domain.sales import validate_amount
from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository

logger = logging.getLogger(__name__)


class OrgService:
    def __init__(
        self,
        db: Session,
        company_repo: CompanyRepository,
        department_repo: DepartmentRepository,
        employee_repo: EmployeeRepository,
    ):
        self.db = db
        self.companies = company_repo
        self.departments = department_repo
        self.employees = employee_repo

    @contextmanager
    def _transaction(
        self, entity: Optional[str] = None, code: Optional[str] = None
    ) -> Iterator[None]:
        """Commit on success, roll back on any error.

        A unique-constraint failure while inserting an entity with an
        external ``code`` is reported as ``DuplicateCodeError``.
        """
        try:
            yield
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if code is not None:
                raise DuplicateCodeError(entity, code) from exc
            raise
        except Exception:
            self.db.rollback()
            raise

    # ── creation ─────────────────────────────────────────────────────

    def create_company(self, name: str) -> CompanyModel:
        """Create a company, or return the existing one with that name."""
        with self._transaction():
            company = self.companies.get_or_create(name)
        logger.info("Company ready: %s (id=%d)", company.name, company.id)
        return company

    def add_department(
        self, company_id: int, name: str, code: Optional[str] = None
    ) -> DepartmentModel:
        with self._transaction("Department", code):
            company = self.companies.get(company_id)
            if company is None:
                raise DanglingOwnerError("Company", company_id)
            department = DepartmentModel(name=name, code=code)
            company.departments.append(department)
            self.db.flush()
        logger.info("Added department %s to %s", department.name, company.name)
        return department

    def add_employee(
        self, department_id: int, name: str, role: str, code: Optional[str] = None
    ) -> EmployeeModel:
        with self._transaction("Employee", code):
            department = self.departments.get(department_id)
            if department is None:
                raise DanglingOwnerError("Department", department_id)
            employee = EmployeeModel(name=name, role=role, code=code)
            department.employees.append(employee)
            self.db.flush()
        logger.info("Added employee %s (%s) to %s", employee.name, employee.role, department.name)
        return employee

    def add_sale(
        self,
        employee_id: int,
        amount: float,
        sale_date: date,
        code: Optional[str] = None,
    ) -> SaleModel:
        value = validate_amount(amount)
        with self._transaction("Sale", code):
            employee = self.employees.get(employee_id)
            if employee is None:
                raise DanglingOwnerError("Employee", employee_id)
            sale = SaleModel(amount=value, date=sale_date, code=code)
            employee.sales.append(sale)
            self.db.flush()
        logger.info("Recorded sale of %.2f for %s", sale.amount, employee.name)
        return sale

    # ── updates ──────────────────────────────────────────────────────

    def update_employee(
        self,
        employee_id: int,
        *,
        name: Optional[str] = None,
        role: Optional[str] = None,
    ) -> EmployeeModel:
        with self._transaction():
            employee = self.employees.get(employee_id)
            if employee is None:
                raise NotFoundError("Employee", employee_id)
            if name is not None:
                employee.name = name
            if role is not None:
                employee.role = role
        return employee

    def move_employee(self, employee_id: int, department_id: int) -> EmployeeModel:
        """Re-parent an employee; their sales move with them."""
        with self._transaction():
            employee = self.employees.get(employee_id)
            if employee is None:
                raise NotFoundError("Employee", employee_id)
            target = self.departments.get(department_id)
            if target is None:
                raise DanglingOwnerError("Department", department_id)
            if employee.department is not target:
                target.employees.append(employee)
        logger.info("Moved %s to %s", employee.name, target.name)
        return employee

    # ── deletion ─────────────────────────────────────────────────────

    def remove_employee(self, department_id: int, employee_id: int) -> None:
        """Delete one employee of a department, cascading to their sales."""
        with self._transaction():
            department = self.departments.get(department_id)
            if department is None:
                raise NotFoundError("Department", department_id)
            employee = next((e for e in department.employees if e.id == employee_id), None)
            if employee is None:
                raise NotFoundError("Employee", employee_id)
            department.employees.remove(employee)
            self.db.flush()
        logger.info("Removed employee %d from %s", employee_id, department.name)

    def remove_all_employees(self, department_id: int) -> int:
        """Delete every employee of a department (and their sales); return the count."""
        with self._transaction():
            department = self.departments.get(department_id)
            if department is None:
                raise NotFoundError("Department", department_id)
            removed = len(department.employees)
            department.employees.clear()
            self.db.flush()
        logger.info("Removed %d employees from %s", removed, department.name)
        return removed

    def remove_department(self, department_id: int) -> None:
        """Delete a department together with its employees and their sales."""
        with self._transaction():
            department = self.departments.get(department_id)
            if department is None:
                raise NotFoundError("Department", department_id)
            department.company.departments.remove(department)
            self.db.flush()
        logger.info("Removed department %d", department_id)

    # ── lookups ──────────────────────────────────────────────────────

    def find_employee_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        return self.employees.get(employee_id)

    def find_employee_by_name(
        self, name: str, company_id: Optional[int] = None
    ) -> Optional[EmployeeModel]:
        """Case-insensitive exact match, first in insertion order."""
        return self.employees.find_by_name(name, company_id=company_id)
