"""Department repository."""

from typing import List, Optional

from sqlalchemy.orm import Session

from orgledger.models.department import DepartmentModel
from orgledger.repositories.base import BaseRepository
from orgledger.repositories.employee_repo import name_key


class DepartmentRepository(BaseRepository[DepartmentModel]):
    def __init__(self, db: Session):
        super().__init__(db, DepartmentModel)

    def get_for_company(self, company_id: int) -> List[DepartmentModel]:
        return (
            self.db.query(self.model)
            .filter(self.model.company_id == company_id)
            .order_by(self.model.id)
            .all()
        )

    def get_by_name(self, company_id: int, name: str) -> Optional[DepartmentModel]:
        """First department in the company with this name (case-insensitive)."""
        wanted = name_key(name)
        return next(
            (d for d in self.get_for_company(company_id) if name_key(d.name) == wanted),
            None,
        )
