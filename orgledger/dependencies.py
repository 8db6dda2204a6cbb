"""Dependency injection / factory functions for FastAPI.

Every service is constructed here with its full dependency tree.
"""

from functools import lru_cache

from sqlalchemy.orm import Session

from orgledger.config import Settings
from orgledger.engines.report_engine import ReportEngine
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService


@lru_cache
def get_settings() -> Settings:
    return Settings()


# ── Singletons (stateless, reusable) ────────────────────────────────────

@lru_cache
def get_report_engine() -> ReportEngine:
    s = get_settings()
    return ReportEngine(
        currency_symbol=s.currency_symbol,
        date_format=s.date_format,
        podium_size=s.podium_size,
    )


# ── Per-request (need a DB session) ─────────────────────────────────────

def get_org_service(db: Session) -> OrgService:
    return OrgService(
        db=db,
        company_repo=CompanyRepository(db),
        department_repo=DepartmentRepository(db),
        employee_repo=EmployeeRepository(db),
    )


def get_report_service(db: Session) -> ReportService:
    return ReportService(
        report_engine=get_report_engine(),
        company_repo=CompanyRepository(db),
        settings=get_settings(),
    )


def get_seed_service(db: Session) -> SeedService:
    return SeedService(db=db, company_repo=CompanyRepository(db))
