"""Company repository."""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.repositories.base import BaseRepository
from orgledger.repositories.employee_repo import name_key


class CompanyRepository(BaseRepository[CompanyModel]):
    def __init__(self, db: Session):
        super().__init__(db, CompanyModel)

    def get_by_name(self, name: str) -> Optional[CompanyModel]:
        """Return existing company by name (case-insensitive)."""
        wanted = name_key(name)
        companies = self.db.query(self.model).order_by(self.model.id).all()
        return next((c for c in companies if name_key(c.name) == wanted), None)

    def get_or_create(self, name: str) -> CompanyModel:
        """Return existing company or create a new one (idempotent)."""
        existing = self.get_by_name(name)
        if existing:
            return existing
        return self.create(CompanyModel(name=name.strip()))

    def get_with_graph(self, company_id: int) -> Optional[CompanyModel]:
        """Company with departments, employees and sales eagerly loaded."""
        return (
            self.db.query(self.model)
            .options(
                selectinload(self.model.departments)
                .selectinload(DepartmentModel.employees)
                .selectinload(EmployeeModel.sales)
            )
            .filter(self.model.id == company_id)
            .first()
        )
