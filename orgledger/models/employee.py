"""Employee ORM model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from orgledger.database import Base


class EmployeeModel(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True)  # external reference, e.g. "E001"
    name = Column(String, nullable=False, index=True)
    role = Column(String, nullable=False)
    department_id = Column(
        Integer, ForeignKey("departments.id", ondelete="CASCADE"), index=True
    )

    # Relationships
    department = relationship("DepartmentModel", back_populates="employees")
    sales = relationship(
        "SaleModel",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="SaleModel.id",
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name} role={self.role}>"
