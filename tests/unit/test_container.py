"""Tests for dependency injection container.

Verifies that the DI container correctly wires all dependencies and provides
proper isolation for testing.
"""

from dependency_injector import providers

from orgledger.config import Settings
from orgledger.container import AppContainer
from orgledger.engines.report_engine import ReportEngine
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.repositories.sale_repo import SaleRepository
from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService


def _container_on(db) -> AppContainer:
    container = AppContainer()
    container.db_session.override(providers.Object(db))
    return container


class TestContainerConfiguration:
    """Test container configuration and wiring."""

    def test_container_creates_settings(self):
        """Container provides Settings singleton."""
        container = AppContainer()
        settings = container.settings()

        assert isinstance(settings, Settings)
        assert settings.app_name == "org-ledger"

        # Singleton: same instance returned
        assert settings is container.settings()

    def test_container_creates_repositories(self, db):
        container = _container_on(db)

        repos = [
            (container.company_repo(), CompanyRepository),
            (container.department_repo(), DepartmentRepository),
            (container.employee_repo(), EmployeeRepository),
            (container.sale_repo(), SaleRepository),
        ]

        for repo_instance, repo_class in repos:
            assert isinstance(repo_instance, repo_class)
            assert repo_instance.db is db

    def test_container_creates_engine_from_settings(self):
        container = AppContainer()
        container.settings.override(
            providers.Object(Settings(currency_symbol="€", podium_size=5))
        )

        engine = container.report_engine()

        assert isinstance(engine, ReportEngine)
        assert engine.currency_symbol == "€"
        assert engine.podium_size == 5

    def test_container_creates_services(self, db):
        container = _container_on(db)

        services = [
            (container.org_service(), OrgService),
            (container.report_service(), ReportService),
            (container.seed_service(), SeedService),
        ]

        for service_instance, service_class in services:
            assert isinstance(service_instance, service_class)


class TestContainerDependencies:
    """Test that dependencies are properly wired."""

    def test_org_service_receives_repositories(self, db):
        service = _container_on(db).org_service()

        assert service.db is db
        assert isinstance(service.companies, CompanyRepository)
        assert isinstance(service.departments, DepartmentRepository)
        assert isinstance(service.employees, EmployeeRepository)

    def test_report_service_receives_engine(self, db):
        service = _container_on(db).report_service()
        assert isinstance(service.engine, ReportEngine)

    def test_services_share_session(self, db):
        container = _container_on(db)
        summary = container.seed_service().load_sample_data()

        report = container.report_service().full_report(summary["company_id"])
        assert report.company == "Acme Inc."


class TestContainerLifecycle:
    """Test container lifecycle management."""

    def test_init_resources_creates_schema(self):
        container = AppContainer()
        container.settings.override(
            providers.Object(Settings(database_url="sqlite:///:memory:"))
        )
        container.init_resources()

        summary = container.seed_service().load_sample_data()
        assert summary["created"] is True

        container.shutdown_resources()

    def test_can_override_database(self, db_engine):
        container = AppContainer()
        container.db_engine.override(providers.Object(db_engine))
        assert container.db_engine() is db_engine

    def test_multiple_containers_isolated(self):
        container1 = AppContainer()
        container2 = AppContainer()
        assert container1.settings().app_name == container2.settings().app_name
