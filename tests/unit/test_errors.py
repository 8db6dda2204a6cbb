"""Tests for the typed error hierarchy."""

import pytest

from orgledger.domain.errors import (
    DanglingOwnerError,
    DuplicateCodeError,
    ErrorKind,
    InvalidAmountError,
    NotFoundError,
    OrgLedgerError,
)


@pytest.mark.parametrize(
    "error,kind,status",
    [
        (InvalidAmountError(-5), ErrorKind.INVALID_AMOUNT, 422),
        (NotFoundError("Employee", 7), ErrorKind.NOT_FOUND, 404),
        (DanglingOwnerError("Department", 3), ErrorKind.DANGLING_OWNER, 409),
        (DuplicateCodeError("Department", "D001"), ErrorKind.DUPLICATE_CODE, 409),
    ],
)
def test_kind_and_status(error, kind, status):
    assert isinstance(error, OrgLedgerError)
    assert error.kind is kind
    assert error.status_code == status


def test_messages():
    assert str(NotFoundError("Employee", "Zed")) == "Employee 'Zed' not found"
    assert "-5" in InvalidAmountError(-5).message
    assert "Department 3" in DanglingOwnerError("Department", 3).message


def test_kind_values_are_strings():
    assert ErrorKind.NOT_FOUND.value == "not_found"
    assert ErrorKind.DANGLING_OWNER == "dangling_owner"


def test_duplicate_code_message():
    assert DuplicateCodeError("Sale", "S001").message == "Sale code 'S001' is already in use"
