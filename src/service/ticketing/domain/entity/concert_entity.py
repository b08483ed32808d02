"""
Concert entity

[Business Invariants]
- tickets_issued never exceeds total_tickets
- Tickets exist only once both the artist and the venue validated the concert
- cashed_out flips to True once and stays there
"""

import attrs

from src.platform.config.business_config import IntegerWidth, TicketingRules
from src.platform.types.saturating_int import saturating_add, saturating_sub
from src.service.ticketing.domain.validators import FlagValidators, NumericValidators


@attrs.define(frozen=True)
class Concert:
    id: int = attrs.field(validator=NumericValidators.validate_u64)
    artist_id: int = attrs.field(validator=NumericValidators.validate_u64)
    venue_id: int = attrs.field(validator=NumericValidators.validate_u64)
    date_ts: int = attrs.field(validator=NumericValidators.validate_u64)
    ticket_price: int = attrs.field(validator=NumericValidators.validate_u64)
    total_tickets: int = attrs.field(validator=NumericValidators.validate_u32)
    tickets_issued: int = attrs.field(default=0, validator=NumericValidators.validate_u32)
    tickets_sold: int = attrs.field(default=0, validator=NumericValidators.validate_u32)
    revenue: int = attrs.field(default=0, validator=NumericValidators.validate_u64)
    validated_by_artist: bool = attrs.field(default=False, validator=FlagValidators.validate_bool)
    validated_by_venue: bool = attrs.field(default=False, validator=FlagValidators.validate_bool)
    cashed_out: bool = attrs.field(default=False, validator=FlagValidators.validate_bool)

    @property
    def is_fully_validated(self) -> bool:
        return self.validated_by_artist and self.validated_by_venue

    @property
    def is_sold_out(self) -> bool:
        return self.tickets_issued >= self.total_tickets

    @property
    def remaining_tickets(self) -> int:
        return saturating_sub(self.total_tickets, self.tickets_issued)

    def is_within_redemption_window(self, now_ts: int) -> bool:
        window_start = saturating_sub(self.date_ts, TicketingRules.REDEMPTION_WINDOW_SECONDS)
        return window_start <= now_ts <= self.date_ts

    def has_started(self, now_ts: int) -> bool:
        return now_ts >= self.date_ts

    def mark_validated_by_artist(self) -> 'Concert':
        return attrs.evolve(self, validated_by_artist=True)

    def mark_validated_by_venue(self) -> 'Concert':
        return attrs.evolve(self, validated_by_venue=True)

    def record_issue(self) -> 'Concert':
        return attrs.evolve(
            self,
            tickets_issued=saturating_add(self.tickets_issued, 1, ceiling=IntegerWidth.U32_MAX),
        )

    def record_sale(self, amount_paid: int) -> 'Concert':
        return attrs.evolve(
            self,
            tickets_issued=saturating_add(self.tickets_issued, 1, ceiling=IntegerWidth.U32_MAX),
            tickets_sold=saturating_add(self.tickets_sold, 1, ceiling=IntegerWidth.U32_MAX),
            revenue=saturating_add(self.revenue, amount_paid),
        )

    def mark_cashed_out(self) -> 'Concert':
        return attrs.evolve(self, cashed_out=True)
