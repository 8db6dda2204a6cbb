"""Sale repository."""

from typing import List

from sqlalchemy.orm import Session

from orgledger.models.sale import SaleModel
from orgledger.repositories.base import BaseRepository


class SaleRepository(BaseRepository[SaleModel]):
    def __init__(self, db: Session):
        super().__init__(db, SaleModel)

    def get_for_employee(self, employee_id: int) -> List[SaleModel]:
        return (
            self.db.query(self.model)
            .filter(self.model.employee_id == employee_id)
            .order_by(self.model.id)
            .all()
        )
