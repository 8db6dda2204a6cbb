"""Employee repository."""

from typing import List, Optional

from sqlalchemy.orm import Session

from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.repositories.base import BaseRepository


def name_key(name: str) -> str:
    """Normalised form for case-insensitive name comparison.

    >>> name_key("  Émile ZOLA ") == name_key("émile zola")
    True
    """
    return name.strip().casefold()


class EmployeeRepository(BaseRepository[EmployeeModel]):
    def __init__(self, db: Session):
        super().__init__(db, EmployeeModel)

    def find_by_name(
        self, name: str, company_id: Optional[int] = None
    ) -> Optional[EmployeeModel]:
        """Case-insensitive exact match; first hit in insertion order.

        Compared in Python with ``str.casefold`` since SQLite's ``lower()``
        only folds ASCII.
        """
        wanted = name_key(name)
        candidates = (
            self.get_for_company(company_id)
            if company_id is not None
            else self.db.query(self.model).order_by(self.model.id).all()
        )
        return next((e for e in candidates if name_key(e.name) == wanted), None)

    def get_for_department(self, department_id: int) -> List[EmployeeModel]:
        return (
            self.db.query(self.model)
            .filter(self.model.department_id == department_id)
            .order_by(self.model.id)
            .all()
        )

    def get_for_company(self, company_id: int) -> List[EmployeeModel]:
        return (
            self.db.query(self.model)
            .join(DepartmentModel)
            .filter(DepartmentModel.company_id == company_id)
            .order_by(self.model.id)
            .all()
        )
