"""Core business-logic engines."""

from orgledger.engines.report_engine import ReportEngine

__all__ = [
    "ReportEngine",
]
