"""Report endpoints: read-only aggregation queries for one company.

Every route loads the company graph once and returns the query result.
Unknown companies yield 404; an empty company yields empty results.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from orgledger.config import Settings
from orgledger.database import get_db
from orgledger.dependencies import get_report_service, get_settings
from orgledger.logging_config import get_logger
from orgledger.schemas.reports import (
    CompanyReport,
    DepartmentHeadcount,
    DepartmentRoster,
    EmployeeSalesTotal,
    EmployeeSearchCriteria,
    RankedSale,
    SalesLeaderboard,
    TopSalesperson,
)

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{company_id}/roster", response_model=List[DepartmentRoster])
def employees_by_department(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="roster", company_id=company_id)
    return get_report_service(db).employees_by_department(company_id)


@router.get("/{company_id}/totals", response_model=List[EmployeeSalesTotal])
def total_sales_per_employee(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="totals", company_id=company_id)
    return get_report_service(db).total_sales_per_employee(company_id)


@router.get("/{company_id}/top-salespeople", response_model=List[TopSalesperson])
def top_salesperson_per_department(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="top_salespeople", company_id=company_id)
    return get_report_service(db).top_salesperson_per_department(company_id)


@router.get("/{company_id}/without-sales", response_model=List[EmployeeSalesTotal])
def employees_without_sales(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="without_sales", company_id=company_id)
    return get_report_service(db).employees_without_sales(company_id)


@router.get("/{company_id}/headcount", response_model=List[DepartmentHeadcount])
def departments_by_headcount(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="headcount", company_id=company_id)
    return get_report_service(db).departments_by_headcount(company_id)


@router.get("/{company_id}/top-sales", response_model=List[RankedSale])
def top_sales(
    company_id: int,
    n: Optional[int] = Query(default=None, ge=0, le=1000),
    db: Session = Depends(get_db),
):
    logger.info("report_requested", report="top_sales", company_id=company_id, n=n)
    return get_report_service(db).top_sales(company_id, n=n)


@router.get("/{company_id}/leaderboard", response_model=SalesLeaderboard)
def sales_leaderboard(
    company_id: int,
    limit: Optional[int] = Query(default=None, ge=0, le=1000),
    db: Session = Depends(get_db),
):
    logger.info("report_requested", report="leaderboard", company_id=company_id, limit=limit)
    return get_report_service(db).sales_leaderboard(company_id, limit=limit)


@router.get("/{company_id}/search", response_model=List[EmployeeSalesTotal])
def search_employees(
    company_id: int,
    department: List[str] = Query(default=[]),
    min_total: float = 0.0,
    limit: Optional[int] = Query(default=None, ge=0, le=1000),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Employees in any of the given departments with total sales above ``min_total``."""
    criteria = EmployeeSearchCriteria(
        departments=department,
        min_total=min_total,
        limit=settings.search_result_limit if limit is None else limit,
    )
    logger.info("report_requested", report="search", company_id=company_id, departments=department)
    return get_report_service(db).search_employees(company_id, criteria)


@router.get("/{company_id}/full", response_model=CompanyReport)
def full_report(company_id: int, db: Session = Depends(get_db)):
    logger.info("report_requested", report="full", company_id=company_id)
    return get_report_service(db).full_report(company_id)
