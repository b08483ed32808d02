"""
Saturating arithmetic over unsigned integer widths.

Ledger counters and amounts clamp at their width instead of overflowing, so
no operation aborts half way through because a number grew too large.
"""

from src.platform.config.business_config import IntegerWidth
from src.platform.exception.exceptions import DomainError


def saturating_add(value: int, amount: int, *, ceiling: int = IntegerWidth.U64_MAX) -> int:
    return min(value + amount, ceiling)


def saturating_sub(value: int, amount: int) -> int:
    return max(value - amount, 0)


def ensure_unsigned(value: int, field_name: str, *, ceiling: int = IntegerWidth.U64_MAX) -> int:
    """Reject values that cannot live in an unsigned field of the given width."""
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainError(f'{field_name} must be an integer')
    if value < 0:
        raise DomainError(f'{field_name} must not be negative')
    if value > ceiling:
        raise DomainError(f'{field_name} must not exceed {ceiling}')
    return value
