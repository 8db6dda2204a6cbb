"""Tests for ReportService: company lookup plus query bundling."""

import pytest

from orgledger.config import Settings
from orgledger.domain.errors import NotFoundError
from orgledger.engines.report_engine import ReportEngine
from orgledger.schemas.reports import EmployeeSearchCriteria
from orgledger.services.report_service import ReportService


class TestLoadCompany:
    def test_unknown_company(self, report_service):
        with pytest.raises(NotFoundError) as exc_info:
            report_service.load_company(42)
        assert exc_info.value.status_code == 404

    def test_queries_raise_for_unknown_company(self, report_service):
        with pytest.raises(NotFoundError):
            report_service.total_sales_per_employee(42)


class TestQueries:
    def test_top_sales_uses_configured_default(self, acme, report_engine, company_repo):
        service = ReportService(report_engine, company_repo, Settings(top_sales_count=2))
        assert [s.amount for s in service.top_sales(acme.id)] == [15000.0, 12000.0]

    def test_top_sales_explicit_n(self, report_service, acme):
        assert len(report_service.top_sales(acme.id, n=4)) == 4

    def test_search_with_criteria(self, report_service, acme):
        criteria = EmployeeSearchCriteria(departments=["Sales"], min_total=10000, limit=5)
        rows = report_service.search_employees(acme.id, criteria)
        assert [r.employee for r in rows] == ["Alice Martin", "Eve Summers"]

    def test_leaderboard(self, report_service, acme):
        board = report_service.sales_leaderboard(acme.id, limit=3)
        assert board.sale_count == 3

    def test_headcount(self, report_service, acme):
        assert report_service.departments_by_headcount(acme.id)[0].department == "Sales"


class TestFullReport:
    def test_full_report_bundles_every_query(self, report_service, acme):
        report = report_service.full_report(acme.id)

        assert report.company == "Acme Inc."
        assert len(report.rosters) == 3
        assert report.sales_per_employee[0].total_sales == 32000.0
        assert [t.employee for t in report.top_salespeople] == [
            "Alice Martin", "Bob Sanchez", "Carol White",
        ]
        assert len(report.employees_without_sales) == 3
        assert [s.amount for s in report.top_sales] == [15000.0, 12000.0, 9500.0]
        assert report.leaderboard.total_value == 49000.0

    def test_full_report_for_empty_company(self, report_service, empty_company):
        report = report_service.full_report(empty_company.id)
        assert report.rosters == []
        assert report.leaderboard.sale_count == 0


class TestListCompanies:
    def test_no_companies(self, report_service):
        assert report_service.list_companies() == []

    def test_stats(self, report_service, acme, empty_company):
        stats = {c.name: c for c in report_service.list_companies()}
        assert stats["Acme Inc."].department_count == 3
        assert stats["Acme Inc."].employee_count == 5
        assert stats["Acme Inc."].sale_count == 5
        assert stats["Acme Inc."].total_sales == 49000.0
        assert stats["Empty Co"].employee_count == 0

    def test_custom_engine(self, acme, company_repo):
        service = ReportService(ReportEngine(currency_symbol="£"), company_repo)
        assert service.sales_leaderboard(acme.id).total_display == "£49,000.00"


class TestListCompaniesPaging:
    def test_no_implicit_cap(self, report_service, company_repo):
        from orgledger.models.company import CompanyModel

        for i in range(120):
            company_repo.create(CompanyModel(name=f"Company {i:03d}"))
        assert len(report_service.list_companies()) == 120

    def test_skip_and_limit(self, report_service, acme, empty_company):
        page = report_service.list_companies(skip=1, limit=5)
        assert [c.name for c in page] == ["Empty Co"]
