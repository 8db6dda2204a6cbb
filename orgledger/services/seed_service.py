"""Loads the Acme Inc. reference dataset.

Fully idempotent, safe to re-run. If a company with the sample name already
exists nothing is written.
"""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from orgledger.domain import sample_data
from orgledger.domain.sales import validate_amount
from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel
from orgledger.repositories.company_repo import CompanyRepository

logger = logging.getLogger(__name__)


class SeedService:
    def __init__(self, db: Session, company_repo: CompanyRepository):
        self.db = db
        self.companies = company_repo

    def load_sample_data(self) -> Dict[str, Any]:
        summary: Dict[str, Any] = {
            "company": sample_data.COMPANY_NAME,
            "created": False,
            "departments": 0,
            "employees": 0,
            "sales": 0,
        }

        existing = self.companies.get_by_name(sample_data.COMPANY_NAME)
        if existing is not None:
            summary["company_id"] = existing.id
            logger.info("Sample company %s already present, skipping", existing.name)
            return summary

        try:
            company = self.companies.create(CompanyModel(name=sample_data.COMPANY_NAME))
            departments: Dict[str, DepartmentModel] = {}
            for code, name in sample_data.DEPARTMENTS:
                dept = DepartmentModel(code=code, name=name)
                company.departments.append(dept)
                departments[code] = dept

            employees: Dict[str, EmployeeModel] = {}
            for code, name, role, dept_code in sample_data.EMPLOYEES:
                emp = EmployeeModel(code=code, name=name, role=role)
                departments[dept_code].employees.append(emp)
                employees[code] = emp

            for code, amount, sale_date, emp_code in sample_data.SALES:
                employees[emp_code].sales.append(
                    SaleModel(code=code, amount=validate_amount(amount), date=sale_date)
                )

            self.db.flush()
            self.db.commit()  # One commit for the whole graph
        except Exception as exc:
            self.db.rollback()
            logger.exception("Seeding sample data failed (rolled back): %s", exc)
            raise

        summary.update(
            company_id=company.id,
            created=True,
            departments=len(departments),
            employees=len(employees),
            sales=len(sample_data.SALES),
        )
        logger.info(
            "Seeded %s: %d departments, %d employees, %d sales",
            company.name, summary["departments"], summary["employees"], summary["sales"],
        )
        return summary
