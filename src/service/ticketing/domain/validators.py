"""Ticketing domain validation utilities (attrs validators)."""

from typing import Any

import attrs

from src.platform.config.business_config import IntegerWidth
from src.platform.exception.exceptions import DomainError
from src.platform.types.saturating_int import ensure_unsigned


class NumericValidators:
    """Unsigned integer domains of ledger fields."""

    @staticmethod
    def validate_u16(_instance: Any, attribute: attrs.Attribute, value: int) -> None:
        ensure_unsigned(value, attribute.name, ceiling=IntegerWidth.U16_MAX)

    @staticmethod
    def validate_u32(_instance: Any, attribute: attrs.Attribute, value: int) -> None:
        ensure_unsigned(value, attribute.name, ceiling=IntegerWidth.U32_MAX)

    @staticmethod
    def validate_u64(_instance: Any, attribute: attrs.Attribute, value: int) -> None:
        ensure_unsigned(value, attribute.name, ceiling=IntegerWidth.U64_MAX)

    @staticmethod
    def validate_optional_u64(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
        if value is not None:
            ensure_unsigned(value, attribute.name, ceiling=IntegerWidth.U64_MAX)


class StringValidators:
    """Text and identity fields."""

    @staticmethod
    def validate_str(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
        if not isinstance(value, str):
            raise DomainError(f'{attribute.name} must be a string')

    @staticmethod
    def validate_optional_str(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
        if value is not None and not isinstance(value, str):
            raise DomainError(f'{attribute.name} must be a string or None')


class FlagValidators:
    @staticmethod
    def validate_bool(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
        if not isinstance(value, bool):
            raise DomainError(f'{attribute.name} must be a boolean')
