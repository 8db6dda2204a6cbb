"""Department endpoints: hire into and remove employees from a department."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from orgledger.database import get_db
from orgledger.dependencies import get_org_service
from orgledger.domain.errors import NotFoundError, OrgLedgerError
from orgledger.logging_config import get_logger
from orgledger.repositories.department_repo import DepartmentRepository
from orgledger.repositories.employee_repo import EmployeeRepository
from orgledger.schemas.employee import Employee, EmployeeCreate

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{department_id}/employees", response_model=List[Employee])
def list_employees(department_id: int, db: Session = Depends(get_db)) -> List[Employee]:
    if DepartmentRepository(db).get(department_id) is None:
        raise NotFoundError("Department", department_id)
    employees = EmployeeRepository(db).get_for_department(department_id)
    return [Employee.model_validate(e) for e in employees]


@router.post("/{department_id}/employees", response_model=Employee, status_code=201)
def add_employee(
    department_id: int,
    request: EmployeeCreate,
    db: Session = Depends(get_db),
) -> Employee:
    """Create an employee in the department."""
    logger.info("employee_add_requested", department_id=department_id, name=request.name)

    try:
        employee = get_org_service(db).add_employee(
            department_id, request.name, request.role, code=request.code
        )
    except OrgLedgerError:
        raise
    except Exception as e:
        logger.error("employee_add_failed", department_id=department_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to add employee: {str(e)}")

    logger.info("employee_added", department_id=department_id, employee_id=employee.id)
    return Employee.model_validate(employee)


@router.delete("/{department_id}/employees")
def remove_all_employees(department_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Delete every employee in the department along with their sales."""
    removed = get_org_service(db).remove_all_employees(department_id)
    logger.info("department_emptied", department_id=department_id, removed=removed)
    return {"department_id": department_id, "removed": removed}


@router.delete("/{department_id}/employees/{employee_id}", status_code=204)
def remove_employee(
    department_id: int, employee_id: int, db: Session = Depends(get_db)
) -> Response:
    get_org_service(db).remove_employee(department_id, employee_id)
    logger.info("employee_removed", department_id=department_id, employee_id=employee_id)
    return Response(status_code=204)


@router.delete("/{department_id}", status_code=204)
def remove_department(department_id: int, db: Session = Depends(get_db)) -> Response:
    """Delete the department, its employees and their sales."""
    get_org_service(db).remove_department(department_id)
    logger.info("department_removed", department_id=department_id)
    return Response(status_code=204)
