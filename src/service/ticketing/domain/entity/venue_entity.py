from typing import Optional

import attrs

from src.service.ticketing.domain.validators import NumericValidators, StringValidators


@attrs.define(frozen=True)
class Venue:
    id: int = attrs.field(validator=NumericValidators.validate_u64)
    name: str = attrs.field(validator=StringValidators.validate_str)
    # Informational only, never checked against a concert's total_tickets
    capacity: int = attrs.field(validator=NumericValidators.validate_u32)
    # Basis points of concert revenue paid to the venue; values above 10000 are tolerated
    venue_cut_bps: int = attrs.field(validator=NumericValidators.validate_u16)
    next_concert_date: Optional[int] = attrs.field(
        default=None, validator=NumericValidators.validate_optional_u64
    )

    def update_details(
        self,
        *,
        name: str,
        capacity: int,
        venue_cut_bps: int,
        next_concert_date: Optional[int],
    ) -> 'Venue':
        return attrs.evolve(
            self,
            name=name,
            capacity=capacity,
            venue_cut_bps=venue_cut_bps,
            next_concert_date=next_concert_date,
        )
