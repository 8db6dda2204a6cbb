"""Loads a company graph and runs the aggregation queries over it.

Lookup of the company is the only step that can fail; the queries
themselves are total.
"""

import logging
import math
from typing import List, Optional

from orgledger.config import Settings
from orgledger.domain.errors import NotFoundError
from orgledger.engines.report_engine import ReportEngine
from orgledger.models.company import CompanyModel
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.schemas.company import CompanyWithStats
from orgledger.schemas.reports import (
    CompanyReport,
    DepartmentHeadcount,
    DepartmentRoster,
    EmployeeSalesTotal,
    EmployeeSearchCriteria,
    RankedSale,
    SalesLeaderboard,
    TopSalesperson,
)

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        report_engine: ReportEngine,
        company_repo: CompanyRepository,
        settings: Optional[Settings] = None,
    ):
        self.engine = report_engine
        self.companies = company_repo
        self._settings = settings or Settings()

    def load_company(self, company_id: int) -> CompanyModel:
        company = self.companies.get_with_graph(company_id)
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    # ── single queries ───────────────────────────────────────────────

    def employees_by_department(self, company_id: int) -> List[DepartmentRoster]:
        return self.engine.employees_by_department(self.load_company(company_id))

    def total_sales_per_employee(self, company_id: int) -> List[EmployeeSalesTotal]:
        return self.engine.total_sales_per_employee(self.load_company(company_id))

    def top_salesperson_per_department(self, company_id: int) -> List[TopSalesperson]:
        return self.engine.top_salesperson_per_department(self.load_company(company_id))

    def employees_without_sales(self, company_id: int) -> List[EmployeeSalesTotal]:
        return self.engine.employees_without_sales(self.load_company(company_id))

    def departments_by_headcount(self, company_id: int) -> List[DepartmentHeadcount]:
        return self.engine.departments_by_headcount(self.load_company(company_id))

    def top_sales(self, company_id: int, n: Optional[int] = None) -> List[RankedSale]:
        n = self._settings.top_sales_count if n is None else n
        return self.engine.top_sales(self.load_company(company_id), n=n)

    def sales_leaderboard(
        self, company_id: int, limit: Optional[int] = None
    ) -> SalesLeaderboard:
        return self.engine.sales_leaderboard(self.load_company(company_id), limit=limit)

    def search_employees(
        self, company_id: int, criteria: EmployeeSearchCriteria
    ) -> List[EmployeeSalesTotal]:
        return self.engine.search_employees(
            self.load_company(company_id),
            departments=criteria.departments,
            min_total=criteria.min_total,
            limit=criteria.limit,
        )

    # ── bundles ──────────────────────────────────────────────────────

    def full_report(self, company_id: int) -> CompanyReport:
        """Run every query once against a single load of the graph."""
        company = self.load_company(company_id)
        report = CompanyReport(
            company_id=company.id,
            company=company.name,
            rosters=self.engine.employees_by_department(company),
            sales_per_employee=self.engine.total_sales_per_employee(company),
            top_salespeople=self.engine.top_salesperson_per_department(company),
            employees_without_sales=self.engine.employees_without_sales(company),
            headcount=self.engine.departments_by_headcount(company),
            top_sales=self.engine.top_sales(company, n=self._settings.top_sales_count),
            leaderboard=self.engine.sales_leaderboard(company),
        )
        logger.info("Built full report for %s", company.name)
        return report

    def list_companies(
        self, skip: int = 0, limit: Optional[int] = None
    ) -> List[CompanyWithStats]:
        """Companies in insertion order with headcount and sales totals.

        ``limit=None`` returns every company after the first ``skip``.
        """
        results: List[CompanyWithStats] = []
        for c in self.companies.get_all(skip=skip, limit=limit):
            company = self.load_company(c.id)
            employees = [e for d in company.departments for e in d.employees]
            amounts = [s.amount for e in employees for s in e.sales]
            results.append(CompanyWithStats(
                id=company.id,
                name=company.name,
                department_count=len(company.departments),
                employee_count=len(employees),
                sale_count=len(amounts),
                total_sales=math.fsum(amounts),
            ))
        return results
