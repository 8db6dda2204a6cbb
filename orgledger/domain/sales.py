"""Sales arithmetic and ordering rules shared by every report.

Usage:
    from orgledger.domain.sales import total_sales, ranked_sales

    total = total_sales(employee)
    best_three = ranked_sales(all_sales)[:3]
"""

import math
from typing import Iterable, List, Optional, Sequence, TypeVar

from orgledger.domain.errors import InvalidAmountError
from orgledger.models.employee import EmployeeModel
from orgledger.models.sale import SaleModel

T = TypeVar("T")


def total_sales(employee: EmployeeModel) -> float:
    """Sum of an employee's sale amounts; 0.0 when there are none.

    Recomputed on every call, never cached on the model.
    """
    return math.fsum(s.amount for s in employee.sales)


def has_no_sales(employee: EmployeeModel) -> bool:
    """True when the employee has no sales or their total is not positive."""
    return not employee.sales or total_sales(employee) <= 0


def sale_rank_key(sale: SaleModel) -> tuple:
    """Sort key: amount desc, then date desc, then insertion order (id asc)."""
    return (-sale.amount, -sale.date.toordinal(), sale.id)


def ranked_sales(sales: Iterable[SaleModel]) -> List[SaleModel]:
    """Sales ordered by ``sale_rank_key``."""
    return sorted(sales, key=sale_rank_key)


def first_max(items: Sequence[T], key) -> Optional[T]:
    """Item with the largest key; ties go to the earliest item.

    >>> first_max([("a", 1), ("b", 3), ("c", 3)], key=lambda t: t[1])
    ('b', 3)
    >>> first_max([], key=len) is None
    True
    """
    best: Optional[T] = None
    best_value = None
    for item in items:
        value = key(item)
        if best is None or value > best_value:
            best, best_value = item, value
    return best


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for an empty sequence.

    >>> mean([10.0, 20.0])
    15.0
    >>> mean([])
    0.0
    """
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def validate_amount(amount) -> float:
    """Return ``amount`` as a float, or raise if it cannot be a sale amount.

    Raises:
        InvalidAmountError: If amount is negative, NaN, infinite or not numeric.
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(amount)
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise InvalidAmountError(amount) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidAmountError(amount)
    return value
