import attrs

from src.platform.config.business_config import TicketingRules
from src.platform.types.saturating_int import saturating_sub


@attrs.define(frozen=True)
class PayoutSplit:
    """Division of a concert's revenue between its venue and its artist"""

    venue_cut: int
    artist_cut: int

    @classmethod
    def from_revenue(cls, *, revenue: int, venue_cut_bps: int) -> 'PayoutSplit':
        venue_cut = revenue * venue_cut_bps // TicketingRules.BPS_DENOMINATOR
        # A cut above 10000 bps leaves the artist with nothing rather than a debt
        return cls(venue_cut=venue_cut, artist_cut=saturating_sub(revenue, venue_cut))

    @property
    def total(self) -> int:
        return self.venue_cut + self.artist_cut
