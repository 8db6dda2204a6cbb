"""Tests for SeedService: loading the Acme Inc. sample organisation."""

from orgledger.domain import sample_data
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel


def test_seed_creates_full_graph(db, seed_service):
    summary = seed_service.load_sample_data()

    assert summary["created"] is True
    assert summary["company"] == "Acme Inc."
    assert summary["departments"] == 3
    assert summary["employees"] == 5
    assert summary["sales"] == 5
    assert db.query(DepartmentModel).count() == 3
    assert db.query(EmployeeModel).count() == 5
    assert db.query(SaleModel).count() == 5


def test_seed_is_idempotent(db, seed_service):
    first = seed_service.load_sample_data()
    second = seed_service.load_sample_data()

    assert second["created"] is False
    assert second["company_id"] == first["company_id"]
    assert db.query(EmployeeModel).count() == 5


def test_employees_land_in_their_departments(seed_service, company_repo):
    summary = seed_service.load_sample_data()
    company = company_repo.get_with_graph(summary["company_id"])

    placement = {e.code: d.code for d in company.departments for e in d.employees}
    assert placement == {code: dept for code, _, _, dept in sample_data.EMPLOYEES}


def test_sales_attached_to_sellers(seed_service, employee_repo):
    seed_service.load_sample_data()
    alice = employee_repo.find_by_name("Alice Martin")
    assert sorted(s.amount for s in alice.sales) == [5000.0, 12000.0, 15000.0]
    assert all(s.employee is alice for s in alice.sales)
