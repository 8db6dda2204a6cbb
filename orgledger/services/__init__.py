"""Service-layer orchestration modules."""

from orgledger.services.org_service import OrgService
from orgledger.services.report_service import ReportService
from orgledger.services.seed_service import SeedService

__all__ = [
    "OrgService",
    "ReportService",
    "SeedService",
]
