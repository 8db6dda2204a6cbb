"""SQLAlchemy ORM models, imported here so Base.metadata sees them."""

from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel

__all__ = [
    "CompanyModel",
    "DepartmentModel",
    "EmployeeModel",
    "SaleModel",
]
