"""Dependency Injection Container.

Centralized definition of all application dependencies using dependency-injector.

Usage::

    from orgledger.container import AppContainer

    container = AppContainer()
    container.init_resources()  # Create tables, open the session

    container.seed_service().load_sample_data()
    report = container.report_service().full_report(company_id=1)
"""

from dependency_injector import containers, providers

from orgledger.config import Settings
from orgledger.database import Base, build_engine, build_session_factory
from orgledger.engines.report_engine import ReportEngine
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.repositories.sale_repo import SaleRepository
from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService


def _init_database(engine):
    """Initialize database schema."""
    import orgledger.models  # noqa: F401  (registers models with Base.metadata)
    Base.metadata.create_all(bind=engine)
    return engine


class AppContainer(containers.DeclarativeContainer):
    """Application Dependency Injection Container.

    - Configuration (Settings)
    - Database (engine, sessions)
    - Repositories (data access)
    - Engines (pure queries)
    - Services (mutations, reports, seeding)
    """

    # ══════════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    settings = providers.Singleton(Settings)

    # ══════════════════════════════════════════════════════════════════
    # DATABASE
    # ══════════════════════════════════════════════════════════════════

    db_engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    db_initialized = providers.Resource(
        _init_database,
        engine=db_engine,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    # Single scoped session per container instance
    db_session = providers.Resource(
        lambda factory: factory(),
        factory=session_factory,
    )

    # ══════════════════════════════════════════════════════════════════
    # REPOSITORIES (Data Access Layer)
    # ══════════════════════════════════════════════════════════════════

    company_repo = providers.Factory(
        CompanyRepository,
        db=db_session,
    )

    department_repo = providers.Factory(
        DepartmentRepository,
        db=db_session,
    )

    employee_repo = providers.Factory(
        EmployeeRepository,
        db=db_session,
    )

    sale_repo = providers.Factory(
        SaleRepository,
        db=db_session,
    )

    # ══════════════════════════════════════════════════════════════════
    # ENGINES (Pure Query Layer)
    # ══════════════════════════════════════════════════════════════════

    report_engine = providers.Factory(
        ReportEngine,
        currency_symbol=settings.provided.currency_symbol,
        date_format=settings.provided.date_format,
        podium_size=settings.provided.podium_size,
    )

    # ══════════════════════════════════════════════════════════════════
    # SERVICES (Orchestration Layer)
    # ══════════════════════════════════════════════════════════════════

    org_service = providers.Factory(
        OrgService,
        db=db_session,
        company_repo=company_repo,
        department_repo=department_repo,
        employee_repo=employee_repo,
    )

    report_service = providers.Factory(
        ReportService,
        report_engine=report_engine,
        company_repo=company_repo,
        settings=settings,
    )

    seed_service = providers.Factory(
        SeedService,
        db=db_session,
        company_repo=company_repo,
    )
