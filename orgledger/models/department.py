"""Department ORM model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from orgledger.database import Base


class DepartmentModel(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True)  # external reference, e.g. "D001"
    name = Column(String, nullable=False)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    company = relationship("CompanyModel", back_populates="departments")
    employees = relationship(
        "EmployeeModel",
        back_populates="department",
        cascade="all, delete-orphan",
        order_by="EmployeeModel.id",
    )

    def __repr__(self) -> str:
        return f"<Department id={self.id} name={self.name}>"
