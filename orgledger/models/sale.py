"""Sale ORM model."""

from sqlalchemy import CheckConstraint, Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from orgledger.database import Base


class SaleModel(Base):
    __tablename__ = "sales"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_sale_amount_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True)  # external reference, e.g. "S001"
    amount = Column(Float, nullable=False)
    date = Column(Date, nullable=False)
    employee_id = Column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )

    # Relationships
    employee = relationship("EmployeeModel", back_populates="sales")

    def __repr__(self) -> str:
        return f"<Sale id={self.id} amount={self.amount} date={self.date}>"
