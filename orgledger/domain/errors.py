"""Typed errors raised by graph mutations and lookups.

One class per failure kind, each tagged with an ``ErrorKind`` so callers can
branch on ``exc.kind`` without isinstance chains. Aggregation queries never
raise these; absence of data is an empty result.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    NOT_FOUND = "not_found"
    DANGLING_OWNER = "dangling_owner"
    DUPLICATE_CODE = "duplicate_code"


class OrgLedgerError(Exception):
    """Base exception for org ledger failures."""

    def __init__(self, message: str, kind: ErrorKind, status_code: int = 400):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        super().__init__(message)


class InvalidAmountError(OrgLedgerError):
    """Sale amount is negative or not a finite number."""

    def __init__(self, amount: float):
        self.amount = amount
        super().__init__(
            f"Sale amount must be a non-negative number, got {amount!r}",
            ErrorKind.INVALID_AMOUNT,
            422,
        )


class NotFoundError(OrgLedgerError):
    """Lookup or deletion referenced an entity that is not in the graph."""

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found", ErrorKind.NOT_FOUND, 404)


class DanglingOwnerError(OrgLedgerError):
    """Attempted to attach a child to an owner that does not exist."""

    def __init__(self, owner: str, owner_id):
        self.owner = owner
        self.owner_id = owner_id
        super().__init__(
            f"Cannot attach to {owner} {owner_id!r}: owner does not exist",
            ErrorKind.DANGLING_OWNER,
            409,
        )


class DuplicateCodeError(OrgLedgerError):
    """External reference code is already used by another entity of that type."""

    def __init__(self, entity: str, code):
        self.entity = entity
        self.code = code
        super().__init__(
            f"{entity} code {code!r} is already in use",
            ErrorKind.DUPLICATE_CODE,
            409,
        )
