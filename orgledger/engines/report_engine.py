"""Read-only aggregation queries over a company's organisational graph.

Every query takes a loaded ``CompanyModel`` (departments → employees → sales),
never mutates it, and never raises: an empty graph yields empty results.
Tie-breaks always fall back to insertion order.
"""

import math
from typing import Iterable, List, Optional

from orgledger.domain.sales import (
    first_max,
    has_no_sales,
    mean,
    ranked_sales,
    total_sales,
)
from orgledger.models.company import CompanyModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel
from orgledger.schemas.reports import (
    DepartmentHeadcount,
    DepartmentRoster,
    EmployeeSalesTotal,
    LeaderboardRow,
    RankedSale,
    RosterEntry,
    SalesLeaderboard,
    TopSalesperson,
)
from orgledger.utils.formatting import format_amount, format_date


class ReportEngine:
    """Group-bys, totals, rankings and filters for one company."""

    def __init__(
        self,
        currency_symbol: str = "$",
        date_format: str = "%Y-%m-%d",
        podium_size: int = 3,
    ):
        self.currency_symbol = currency_symbol
        self.date_format = date_format
        self.podium_size = podium_size

    # ── groupings ────────────────────────────────────────────────────

    def employees_by_department(self, company: CompanyModel) -> List[DepartmentRoster]:
        rosters: list[DepartmentRoster] = []
        for dept in company.departments:
            entries = [
                RosterEntry(employee_id=e.id, name=e.name, role=e.role)
                for e in sorted(dept.employees, key=lambda e: e.name)
            ]
            rosters.append(DepartmentRoster(
                department_id=dept.id,
                department=dept.name,
                has_employees=bool(entries),
                employees=entries,
            ))
        return rosters

    def departments_by_headcount(self, company: CompanyModel) -> List[DepartmentHeadcount]:
        counts = [
            DepartmentHeadcount(
                department_id=d.id,
                department=d.name,
                employee_count=len(d.employees),
            )
            for d in company.departments
        ]
        # sorted() is stable, so equal counts keep department order
        return sorted(counts, key=lambda c: -c.employee_count)

    # ── per-employee totals ──────────────────────────────────────────

    def total_sales_per_employee(self, company: CompanyModel) -> List[EmployeeSalesTotal]:
        totals = [self._employee_total(e) for e in self._employees(company)]
        return sorted(totals, key=lambda t: -t.total_sales)

    def top_salesperson_per_department(self, company: CompanyModel) -> List[TopSalesperson]:
        results: list[TopSalesperson] = []
        for dept in company.departments:
            best = first_max(dept.employees, key=total_sales)
            if best is None:
                results.append(TopSalesperson(department_id=dept.id, department=dept.name))
                continue
            results.append(TopSalesperson(
                department_id=dept.id,
                department=dept.name,
                employee_id=best.id,
                employee=best.name,
                total_sales=total_sales(best),
            ))
        return results

    def employees_without_sales(self, company: CompanyModel) -> List[EmployeeSalesTotal]:
        return [
            self._employee_total(e)
            for e in self._employees(company)
            if has_no_sales(e)
        ]

    def search_employees(
        self,
        company: CompanyModel,
        departments: Iterable[str],
        min_total: float = 0.0,
        limit: Optional[int] = None,
    ) -> List[EmployeeSalesTotal]:
        """Employees in any of ``departments`` whose total exceeds ``min_total``.

        Department names match exactly. Ordered by total descending.
        """
        wanted = set(departments)
        matches = [
            self._employee_total(e)
            for e in self._employees(company)
            if e.department is not None
            and e.department.name in wanted
            and total_sales(e) > min_total
        ]
        matches.sort(key=lambda t: -t.total_sales)
        if limit is not None:
            matches = matches[:max(limit, 0)]
        return matches

    # ── sale rankings ────────────────────────────────────────────────

    def top_sales(self, company: CompanyModel, n: int = 3) -> List[RankedSale]:
        return [self._ranked(s) for s in ranked_sales(self._sales(company))[:max(n, 0)]]

    def sales_leaderboard(
        self, company: CompanyModel, limit: Optional[int] = None
    ) -> SalesLeaderboard:
        fetched = ranked_sales(self._sales(company))
        if limit is not None:
            fetched = fetched[:max(limit, 0)]

        rows = [
            LeaderboardRow(
                **self._ranked(sale).model_dump(),
                rank=rank,
                is_podium=rank <= self.podium_size,
                amount_display=format_amount(sale.amount, self.currency_symbol),
                date_display=format_date(sale.date, self.date_format),
            )
            for rank, sale in enumerate(fetched, start=1)
        ]
        amounts = [s.amount for s in fetched]
        total = math.fsum(amounts)
        avg = mean(amounts)
        return SalesLeaderboard(
            rows=rows,
            sale_count=len(rows),
            total_value=total,
            mean_value=avg,
            total_display=format_amount(total, self.currency_symbol),
            mean_display=format_amount(avg, self.currency_symbol),
        )

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _employees(company: CompanyModel) -> List[EmployeeModel]:
        """All employees of the company in insertion order."""
        employees = [e for d in company.departments for e in d.employees]
        return sorted(employees, key=lambda e: e.id)

    @staticmethod
    def _sales(company: CompanyModel) -> List[SaleModel]:
        return [s for d in company.departments for e in d.employees for s in e.sales]

    @staticmethod
    def _employee_total(employee: EmployeeModel) -> EmployeeSalesTotal:
        return EmployeeSalesTotal(
            employee_id=employee.id,
            employee=employee.name,
            role=employee.role,
            department=employee.department.name if employee.department else None,
            sale_count=len(employee.sales),
            total_sales=total_sales(employee),
        )

    @staticmethod
    def _ranked(sale: SaleModel) -> RankedSale:
        employee = sale.employee
        department = employee.department if employee else None
        return RankedSale(
            sale_id=sale.id,
            code=sale.code,
            amount=sale.amount,
            date=sale.date,
            employee=employee.name if employee else None,
            department=department.name if department else None,
        )
