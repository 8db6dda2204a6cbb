"""Tests for ORM models: relationships, cascades and constraints."""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from orgledger.models.company import CompanyModel
from orgledger.models.department import DepartmentModel
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel


def test_back_references_resolve(acme):
    for dept in acme.departments:
        assert dept.company is acme
        for employee in dept.employees:
            assert employee.department is dept
            for sale in employee.sales:
                assert sale.employee is employee


def test_deleting_company_cascades(db, acme):
    db.delete(acme)
    db.commit()
    assert db.query(DepartmentModel).count() == 0
    assert db.query(EmployeeModel).count() == 0
    assert db.query(SaleModel).count() == 0


def test_negative_amount_rejected_by_database(db, acme):
    employee = acme.departments[0].employees[0]
    employee.sales.append(SaleModel(amount=-1.0, date=date(2025, 1, 1)))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_department_requires_company(db):
    db.add(DepartmentModel(name="Orphan"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_company_name_unique(db):
    db.add(CompanyModel(name="Twin"))
    db.commit()
    db.add(CompanyModel(name="Twin"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_repr(acme):
    assert repr(acme) == "<Company Acme Inc.>"
    assert "Sales" in repr(acme.departments[0])
