"""Company ORM model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from orgledger.database import Base


class CompanyModel(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False, index=True)

    # Relationships (insertion order)
    departments = relationship(
        "DepartmentModel",
        back_populates="company",
        cascade="all, delete-orphan",
        order_by="DepartmentModel.id",
    )

    def __repr__(self) -> str:
        return f"<Company {self.name}>"
