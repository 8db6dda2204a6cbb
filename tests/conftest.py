"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database so tests are fully isolated.
"""

from datetime import date

import pytest
from sqlalchemy.orm import Session

from orgledger.config import Settings
from orgledger.database import Base, build_engine, build_session_factory
from orgledger.engines.report_engine import ReportEngine
from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.repositories.sale_repo import SaleRepository
from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService

import orgledger.models  # noqa: F401


@pytest.fixture()
def db_engine():
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    session = build_session_factory(db_engine)()
    yield session
    session.close()


# ── Repositories and services ────────────────────────────────────────────

@pytest.fixture()
def company_repo(db: Session) -> CompanyRepository:
    return CompanyRepository(db)


@pytest.fixture()
def department_repo(db: Session) -> DepartmentRepository:
    return DepartmentRepository(db)


@pytest.fixture()
def employee_repo(db: Session) -> EmployeeRepository:
    return EmployeeRepository(db)


@pytest.fixture()
def sale_repo(db: Session) -> SaleRepository:
    return SaleRepository(db)


@pytest.fixture()
def org_service(db, company_repo, department_repo, employee_repo) -> OrgService:
    return OrgService(db, company_repo, department_repo, employee_repo)


@pytest.fixture()
def report_engine() -> ReportEngine:
    return ReportEngine()


@pytest.fixture()
def report_service(report_engine, company_repo) -> ReportService:
    return ReportService(report_engine, company_repo, Settings())


@pytest.fixture()
def seed_service(db, company_repo) -> SeedService:
    return SeedService(db, company_repo)


# ── Convenience fixtures ─────────────────────────────────────────────────

@pytest.fixture()
def acme(seed_service, company_repo) -> CompanyModel:
    """The Acme Inc. sample company, fully loaded."""
    summary = seed_service.load_sample_data()
    return company_repo.get_with_graph(summary["company_id"])


@pytest.fixture()
def empty_company(db: Session) -> CompanyModel:
    company = CompanyModel(name="Empty Co")
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture()
def tied_company(db: Session) -> CompanyModel:
    """Two departments whose sales collide on amount and on amount+date."""
    company = CompanyModel(name="Tie Co")
    north = DepartmentModel(name="North")
    south = DepartmentModel(name="South")
    company.departments.extend([north, south])

    ann = EmployeeModel(name="Ann", role="Rep")
    ben = EmployeeModel(name="Ben", role="Rep")
    cat = EmployeeModel(name="Cat", role="Rep")
    north.employees.extend([ann, ben])
    south.employees.append(cat)

    ann.sales.append(SaleModel(code="T1", amount=500.0, date=date(2025, 1, 1)))
    ben.sales.append(SaleModel(code="T2", amount=500.0, date=date(2025, 3, 1)))
    cat.sales.append(SaleModel(code="T3", amount=500.0, date=date(2025, 3, 1)))
    cat.sales.append(SaleModel(code="T4", amount=100.0, date=date(2025, 6, 1)))

    db.add(company)
    db.commit()
    return CompanyRepository(db).get_with_graph(company.id)
