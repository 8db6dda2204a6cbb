"""Health check endpoints with dependency checking.

Checks database connectivity and whether the schema has been created.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

from orgledger.config import Settings
from orgledger.database import get_db
from orgledger.dependencies import get_settings
from orgledger.logging_config import get_logger

router = APIRouter()
logger = get_logger(__name__)

VERSION = "1.0.0"
REQUIRED_TABLES = ("companies", "departments", "employees", "sales")


def check_database(db: Session) -> Dict[str, Any]:
    """Check database connectivity.

    Args:
        db: Database session.

    Returns:
        Dict with status and optional error message.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"healthy": True, "message": "Database connected"}
    except Exception as e:
        logger.error("database_health_check_failed", error=str(e))
        return {"healthy": False, "message": f"Database error: {str(e)}"}


def check_schema(db: Session) -> Dict[str, Any]:
    """Check that every ORM table exists."""
    try:
        existing = set(inspect(db.get_bind()).get_table_names())
        missing = [t for t in REQUIRED_TABLES if t not in existing]
        if missing:
            return {"healthy": False, "message": f"Missing tables: {', '.join(missing)}"}
        return {"healthy": True, "message": "Schema initialized"}
    except Exception as e:
        logger.warning("schema_health_check_failed", error=str(e))
        return {"healthy": False, "message": f"Schema error: {str(e)}"}


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Basic health check - just app status."""
    return {"status": "healthy", "service": settings.app_name, "version": VERSION}


@router.get("/health/detailed")
def detailed_health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Detailed health check with dependency status.

    Returns:
        Health status for the database and its schema.
    """
    checks = {
        "database": check_database(db),
        "schema": check_schema(db),
    }

    all_healthy = all(check["healthy"] for check in checks.values())
    overall_status = "healthy" if all_healthy else "degraded"

    logger.info(
        "health_check_performed",
        status=overall_status,
        database=checks["database"]["healthy"],
        schema=checks["schema"]["healthy"],
    )

    return {
        "status": overall_status,
        "service": settings.app_name,
        "version": VERSION,
        "checks": checks,
    }


@router.get("/health/ready")
def readiness_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Kubernetes-style readiness probe.

    Returns 200 if app can serve traffic, 503 otherwise.
    """
    try:
        db.execute(text("SELECT 1"))
        return {"ready": True}
    except Exception:
        raise HTTPException(status_code=503, detail={"ready": False, "reason": "Database unavailable"})


@router.get("/health/live")
def liveness_check() -> Dict[str, Any]:
    """Kubernetes-style liveness probe."""
    return {"alive": True}
