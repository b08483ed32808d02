import attrs

from src.platform.config.business_config import IntegerWidth
from src.platform.types.saturating_int import saturating_add
from src.service.ticketing.domain.validators import NumericValidators, StringValidators


@attrs.define(frozen=True)
class Artist:
    id: int = attrs.field(validator=NumericValidators.validate_u64)
    name: str = attrs.field(validator=StringValidators.validate_str)
    artist_type: str = attrs.field(validator=StringValidators.validate_str)
    total_tickets_sold: int = attrs.field(default=0, validator=NumericValidators.validate_u32)

    def rename(self, *, name: str, artist_type: str) -> 'Artist':
        return attrs.evolve(self, name=name, artist_type=artist_type)

    def record_ticket_sold(self) -> 'Artist':
        return attrs.evolve(
            self,
            total_tickets_sold=saturating_add(
                self.total_tickets_sold, 1, ceiling=IntegerWidth.U32_MAX
            ),
        )
