"""FastAPI application entry point with structured logging and health checks."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orgledger.api import companies, departments, employees, reports, seed
from orgledger.database import init_db, new_session
from orgledger.dependencies import get_seed_service, get_settings
from orgledger.health import VERSION
from orgledger.health import router as health_router
from orgledger.logging_config import get_logger, setup_logging
from orgledger.middleware.error_handler import register_error_handlers
from orgledger.middleware.request_context import register_request_context

# Setup structured logging
setup_logging(
    json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
    log_level=os.getenv("LOG_LEVEL", "INFO"),
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle for the FastAPI application."""
    logger.info("application_startup", version=VERSION)
    init_db()
    logger.info("database_initialized")

    if get_settings().seed_sample_data:
        db = new_session()
        try:
            summary = get_seed_service(db).load_sample_data()
            logger.info("sample_data_loaded", created=summary["created"])
        finally:
            db.close()

    yield
    logger.info("application_shutdown")


app = FastAPI(
    title="Org Ledger",
    description=(
        "Keeps a company's departments, employees and sales in one graph "
        "and answers roster, headcount and sales-ranking queries over it."
    ),
    version=VERSION,
    lifespan=lifespan,
)

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)
register_request_context(app)
register_error_handlers(app)

# Health checks (no versioning)
app.include_router(health_router, tags=["health"])

API_V1_PREFIX = "/api/v1"

app.include_router(companies.router, prefix=f"{API_V1_PREFIX}/companies", tags=["companies"])
app.include_router(departments.router, prefix=f"{API_V1_PREFIX}/departments", tags=["departments"])
app.include_router(employees.router, prefix=f"{API_V1_PREFIX}/employees", tags=["employees"])
app.include_router(reports.router, prefix=f"{API_V1_PREFIX}/reports", tags=["reports"])
app.include_router(seed.router, prefix=f"{API_V1_PREFIX}/seed", tags=["seed"])


@app.get("/")
def root():
    """Root endpoint - API information and available endpoints."""
    logger.info("root_endpoint_accessed")
    return {
        "service": "Org Ledger API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "health_detailed": "/health/detailed",
        "api_version": "v1",
        "endpoints": {
            "companies": f"{API_V1_PREFIX}/companies/",
            "departments": f"{API_V1_PREFIX}/departments/{{id}}/employees",
            "employees": f"{API_V1_PREFIX}/employees/{{id}}",
            "reports": f"{API_V1_PREFIX}/reports/{{company_id}}/full",
            "seed": f"{API_V1_PREFIX}/seed/",
        },
    }
