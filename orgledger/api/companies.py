"""Company endpoints: create and list companies, manage their departments.

All endpoints use structured logging; typed domain errors are turned into
HTTP responses by the global error handler.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from orgledger.database import get_db
from orgledger.dependencies import get_org_service, get_report_service
from orgledger.domain.errors import NotFoundError, OrgLedgerError
from orgledger.logging_config import get_logger
from orgledger.repositories.company_repo import CompanyRepository
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.schemas.company import Company, CompanyCreate, CompanyWithStats
from orgledger.schemas.department import Department, DepartmentCreate

logger = get_logger(__name__)
router = APIRouter()


@router.get("/", response_model=List[CompanyWithStats])
def list_companies(
    skip: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> List[CompanyWithStats]:
    """List companies with headcount and sales totals.

    Without ``limit`` every company after the first ``skip`` is returned.
    """
    logger.info("companies_list_requested", skip=skip, limit=limit)

    try:
        results = get_report_service(db).list_companies(skip=skip, limit=limit)
        logger.info("companies_list_completed", count=len(results))
        return results
    except Exception as e:
        logger.error("companies_list_failed", error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to list companies: {str(e)}")


@router.post("/", response_model=Company, status_code=201)
def create_company(request: CompanyCreate, db: Session = Depends(get_db)) -> Company:
    """Create a company (returns the existing one if the name is taken)."""
    company = get_org_service(db).create_company(request.name)
    logger.info("company_created", company_id=company.id, name=company.name)
    return Company.model_validate(company)


@router.get("/{company_id}", response_model=Company)
def get_company(company_id: int, db: Session = Depends(get_db)) -> Company:
    company = CompanyRepository(db).get(company_id)
    if company is None:
        raise NotFoundError("Company", company_id)
    return Company.model_validate(company)


@router.get("/{company_id}/departments", response_model=List[Department])
def list_departments(company_id: int, db: Session = Depends(get_db)) -> List[Department]:
    """Departments of a company in insertion order."""
    if CompanyRepository(db).get(company_id) is None:
        raise NotFoundError("Company", company_id)
    departments = DepartmentRepository(db).get_for_company(company_id)
    return [Department.model_validate(d) for d in departments]


@router.post("/{company_id}/departments", response_model=Department, status_code=201)
def add_department(
    company_id: int,
    request: DepartmentCreate,
    db: Session = Depends(get_db),
) -> Department:
    """Create a department owned by the company."""
    logger.info("department_add_requested", company_id=company_id, name=request.name)

    try:
        department = get_org_service(db).add_department(
            company_id, request.name, code=request.code
        )
    except OrgLedgerError:
        raise
    except Exception as e:
        logger.error("department_add_failed", company_id=company_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to add department: {str(e)}")

    logger.info("department_added", company_id=company_id, department_id=department.id)
    return Department.model_validate(department)
