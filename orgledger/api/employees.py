"""Employee endpoints: lookup, update, transfer, and sales recording."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from orgledger.database import get_db
from orgledger.dependencies import get_org_service
from orgledger.domain.errors import NotFoundError, OrgLedgerError
from orgledger.logging_config import get_logger
from orgledger.repositories.sale_repo import SaleRepository
from orgledger.schemas.employee import Employee, EmployeeMove, EmployeeUpdate
from orgledger.schemas.sale import Sale, SaleCreate

logger = get_logger(__name__)
router = APIRouter()


@router.get("/search", response_model=Employee)
def find_employee_by_name(
    name: str = Query(min_length=1),
    company_id: Optional[int] = None,
    db: Session = Depends(get_db),
) -> Employee:
    """First employee whose name matches case-insensitively."""
    employee = get_org_service(db).find_employee_by_name(name, company_id=company_id)
    if employee is None:
        raise NotFoundError("Employee", name)
    return Employee.model_validate(employee)


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, db: Session = Depends(get_db)) -> Employee:
    employee = get_org_service(db).find_employee_by_id(employee_id)
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    return Employee.model_validate(employee)


@router.patch("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: int, request: EmployeeUpdate, db: Session = Depends(get_db)
) -> Employee:
    employee = get_org_service(db).update_employee(
        employee_id, name=request.name, role=request.role
    )
    logger.info("employee_updated", employee_id=employee_id)
    return Employee.model_validate(employee)


@router.post("/{employee_id}/move", response_model=Employee)
def move_employee(
    employee_id: int, request: EmployeeMove, db: Session = Depends(get_db)
) -> Employee:
    """Transfer an employee (and their sales) to another department."""
    employee = get_org_service(db).move_employee(employee_id, request.department_id)
    logger.info("employee_moved", employee_id=employee_id, department_id=request.department_id)
    return Employee.model_validate(employee)


@router.get("/{employee_id}/sales", response_model=List[Sale])
def list_sales(employee_id: int, db: Session = Depends(get_db)) -> List[Sale]:
    if get_org_service(db).find_employee_by_id(employee_id) is None:
        raise NotFoundError("Employee", employee_id)
    return [Sale.model_validate(s) for s in SaleRepository(db).get_for_employee(employee_id)]


@router.post("/{employee_id}/sales", response_model=Sale, status_code=201)
def add_sale(
    employee_id: int, request: SaleCreate, db: Session = Depends(get_db)
) -> Sale:
    """Record a sale; negative amounts are rejected with 422."""
    logger.info("sale_add_requested", employee_id=employee_id, amount=request.amount)

    try:
        sale = get_org_service(db).add_sale(
            employee_id, request.amount, request.date, code=request.code
        )
    except OrgLedgerError:
        raise
    except Exception as e:
        logger.error("sale_add_failed", employee_id=employee_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to add sale: {str(e)}")

    logger.info("sale_added", employee_id=employee_id, sale_id=sale.id)
    return Sale.model_validate(sale)
