"""Global error handling for typed org ledger errors."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from orgledger.domain.errors import OrgLedgerError
from orgledger.logging_config import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers with FastAPI app."""

    @app.exception_handler(OrgLedgerError)
    async def org_ledger_exception_handler(request: Request, exc: OrgLedgerError):
        logger.warning(
            "request_rejected",
            kind=exc.kind.value,
            message=exc.message,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.kind.value,
                "message": exc.message,
                "path": str(request.url.path),
            },
        )
