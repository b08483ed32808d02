import pytest

from src.platform.config.business_config import IntegerWidth
from src.platform.exception.exceptions import DomainError
from src.platform.types.saturating_int import ensure_unsigned, saturating_add, saturating_sub


@pytest.mark.unit
class TestSaturatingInt:
    def test_add_clamps_at_ceiling(self) -> None:
        assert saturating_add(IntegerWidth.U64_MAX - 1, 5) == IntegerWidth.U64_MAX
        assert saturating_add(IntegerWidth.U32_MAX, 1, ceiling=IntegerWidth.U32_MAX) == (
            IntegerWidth.U32_MAX
        )
        assert saturating_add(2, 3) == 5

    def test_sub_clamps_at_zero(self) -> None:
        assert saturating_sub(5, 9) == 0
        assert saturating_sub(9, 5) == 4

    @pytest.mark.parametrize(
        'value, message',
        [
            (-1, 'must not be negative'),
            (2**64, 'must not exceed'),
            (1.5, 'must be an integer'),
            (True, 'must be an integer'),
            ('7', 'must be an integer'),
        ],
    )
    def test_ensure_unsigned_rejects_out_of_domain(self, value, message: str) -> None:
        with pytest.raises(DomainError, match=message):
            ensure_unsigned(value, 'amount')

    def test_ensure_unsigned_returns_valid_value(self) -> None:
        assert ensure_unsigned(0, 'amount') == 0
        assert ensure_unsigned(IntegerWidth.U16_MAX, 'bps', ceiling=IntegerWidth.U16_MAX) == (
            IntegerWidth.U16_MAX
        )
