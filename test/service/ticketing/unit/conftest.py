"""
Unit test fixtures for the ticketing ledger.

Every test builds its own in-memory ledger; no infrastructure is involved.
"""

from typing import Callable, NamedTuple

import pytest

from src.service.ticketing.domain.aggregate.ticketing_ledger_aggregate import TicketingLedger


CONCERT_DATE_TS = 1_000_000
TICKET_PRICE = 100
VENUE_CUT_BPS = 1_000


class ValidatedConcert(NamedTuple):
    ledger: TicketingLedger
    concert_id: int
    artist_id: int
    venue_id: int


@pytest.fixture
def ledger() -> TicketingLedger:
    return TicketingLedger()


@pytest.fixture
def make_validated_concert() -> Callable[..., ValidatedConcert]:
    """Factory for a ledger holding one concert confirmed by both artist and venue"""

    def _make(total_tickets: int, venue_cut_bps: int = VENUE_CUT_BPS) -> ValidatedConcert:
        ledger = TicketingLedger()
        artist_id = ledger.create_artist('Artist', 'band')
        venue_id = ledger.create_venue('Venue', 1_000, venue_cut_bps)
        concert_id = ledger.create_concert(
            artist_id, venue_id, CONCERT_DATE_TS, TICKET_PRICE, total_tickets
        )
        ledger.validate_concert_by_artist(concert_id, artist_id)
        ledger.validate_concert_by_venue(concert_id, venue_id)
        return ValidatedConcert(ledger, concert_id, artist_id, venue_id)

    return _make


@pytest.fixture
def validated_concert(make_validated_concert: Callable[..., ValidatedConcert]) -> ValidatedConcert:
    return make_validated_concert(total_tickets=3)
