"""Org ledger facade: single entry point for the CLI and other in-process callers.

If the internal wiring changes (new repositories, a different engine) only
this file needs updating; every consumer is insulated.

Usage::

    with OrgLedgerFacade() as ledger:      # uses Settings() from .env
        ledger.seed_sample_data()
        report = ledger.get_full_report("Acme Inc.")
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from orgledger.config import Settings
from orgledger.database import Base, build_engine, build_session_factory
from orgledger.engines.report_engine import ReportEngine
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.schemas.reports import EmployeeSearchCriteria
from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService

import orgledger.models  # noqa: F401  (registers models with Base.metadata)

logger = logging.getLogger(__name__)


class OrgLedgerFacade:
    """High-level API over the organisation graph and its reports.

    Hides all internal wiring (session, repos, engine, services).
    Returns only Pydantic dumps and plain dicts, never ORM models.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        self._setup_db()
        self._setup_services()

    # ── internal wiring (private) ─────────────────────────────────────

    def _setup_db(self) -> None:
        s = self._settings
        if s.database_url.startswith("sqlite:///") and ":memory:" not in s.database_url:
            db_path = Path(s.database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(parents=True, exist_ok=True)
        self._engine = build_engine(s.database_url, echo=s.debug)
        Base.metadata.create_all(bind=self._engine)
        Session = build_session_factory(self._engine)
        self._db = Session()

    def _setup_services(self) -> None:
        s = self._settings
        db = self._db
        self._company_repo = CompanyRepository(db)
        engine = ReportEngine(
            currency_symbol=s.currency_symbol,
            date_format=s.date_format,
            podium_size=s.podium_size,
        )
        self._org = OrgService(
            db, self._company_repo, DepartmentRepository(db), EmployeeRepository(db)
        )
        self._reports = ReportService(engine, self._company_repo, s)
        self._seed = SeedService(db, self._company_repo)

    def _company_id(self, company_name: str) -> Optional[int]:
        company = self._company_repo.get_by_name(company_name)
        return company.id if company else None

    # ══════════════════════════════════════════════════════════════════
    # DATA LOADING
    # ══════════════════════════════════════════════════════════════════

    def seed_sample_data(self) -> Dict[str, Any]:
        return self._seed.load_sample_data()

    @property
    def org(self) -> OrgService:
        """Mutation service bound to the facade's session."""
        return self._org

    # ══════════════════════════════════════════════════════════════════
    # READ-ONLY QUERIES
    # ══════════════════════════════════════════════════════════════════

    def list_companies(self) -> List[Dict[str, Any]]:
        return [c.model_dump() for c in self._reports.list_companies()]

    def get_full_report(self, company_name: str) -> Optional[Dict[str, Any]]:
        """All reports for a company, or None if no company has that name."""
        company_id = self._company_id(company_name)
        if company_id is None:
            return None
        return self._reports.full_report(company_id).model_dump()

    def get_top_sales(self, company_name: str, n: Optional[int] = None) -> List[Dict[str, Any]]:
        company_id = self._company_id(company_name)
        if company_id is None:
            return []
        return [s.model_dump() for s in self._reports.top_sales(company_id, n=n)]

    def get_leaderboard(
        self, company_name: str, limit: Optional[int] = None
    ) -> Optional[Dict[str, Any]]:
        company_id = self._company_id(company_name)
        if company_id is None:
            return None
        return self._reports.sales_leaderboard(company_id, limit=limit).model_dump()

    def search_employees(
        self,
        company_name: str,
        departments: Sequence[str],
        min_total: float = 0.0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        company_id = self._company_id(company_name)
        if company_id is None:
            return []
        criteria = EmployeeSearchCriteria(
            departments=list(departments),
            min_total=min_total,
            limit=self._settings.search_result_limit if limit is None else limit,
        )
        return [r.model_dump() for r in self._reports.search_employees(company_id, criteria)]

    # ── lifecycle ─────────────────────────────────────────────────────

    def close(self) -> None:
        """Close the database session and dispose of the engine."""
        self._db.close()
        self._engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
