"""
Unit tests for ticket consumption and concert settlement

Test Focus:
1. use_ticket: closed 24h window ending at the concert start, one-shot
2. cash_out: one-shot revenue split between venue and artist balances
"""

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.ticketing.domain.aggregate.ticketing_ledger_aggregate import TicketingLedger
from src.service.ticketing.domain.value_object.payout_split import PayoutSplit


DATE_TS = 1_000_000
DAY = 86_400


@pytest.mark.unit
class TestUseTicket:
    def test_window_and_single_use(self, make_validated_concert) -> None:
        ledger, concert_id, _, _ = make_validated_concert(total_tickets=2)
        early_ticket = ledger.buy_ticket(concert_id, 'eve', 100)

        assert ledger.use_ticket(early_ticket, 'eve', DATE_TS - DAY - 1) is False
        assert ledger.use_ticket(early_ticket, 'eve', DATE_TS - 10) is True
        assert ledger.use_ticket(early_ticket, 'eve', DATE_TS - 5) is False

        late_ticket = ledger.buy_ticket(concert_id, 'frank', 100)
        assert ledger.use_ticket(late_ticket, 'frank', DATE_TS + 1) is False

    @pytest.mark.parametrize('now_ts', [DATE_TS - DAY, DATE_TS])
    def test_window_bounds_are_inclusive(self, validated_concert, now_ts: int) -> None:
        ledger, concert_id, _, _ = validated_concert
        ticket_id = ledger.buy_ticket(concert_id, 'eve', 100)

        assert ledger.use_ticket(ticket_id, 'eve', now_ts) is True
        assert ledger.get_ticket(ticket_id).used is True

    def test_used_ticket_stays_used_whatever_the_time(self, validated_concert) -> None:
        ledger, concert_id, _, _ = validated_concert
        ticket_id = ledger.buy_ticket(concert_id, 'eve', 100)
        ledger.use_ticket(ticket_id, 'eve', DATE_TS)

        for now_ts in (DATE_TS - DAY, DATE_TS - 1, DATE_TS):
            assert ledger.use_ticket(ticket_id, 'eve', now_ts) is False
        assert ledger.get_ticket(ticket_id).used is True

    def test_only_owner_can_use(self, validated_concert) -> None:
        ledger, concert_id, _, _ = validated_concert
        ticket_id = ledger.buy_ticket(concert_id, 'eve', 100)

        assert ledger.use_ticket(ticket_id, 'mallory', DATE_TS) is False
        assert ledger.get_ticket(ticket_id).used is False

    def test_unredeemed_ticket_cannot_be_used(self, validated_concert) -> None:
        ledger, concert_id, artist_id, _ = validated_concert
        ticket_id = ledger.distribute_ticket(concert_id, artist_id, 'CODE')

        assert ledger.use_ticket(ticket_id, '', DATE_TS) is False

    def test_unknown_ticket_cannot_be_used(self, validated_concert) -> None:
        ledger, _, _, _ = validated_concert

        assert ledger.use_ticket(12345, 'eve', DATE_TS) is False

    def test_window_start_clamps_at_zero(self, ledger: TicketingLedger) -> None:
        artist_id = ledger.create_artist('Early', 'dj')
        venue_id = ledger.create_venue('Club', 50, 0)
        concert_id = ledger.create_concert(artist_id, venue_id, 100, 5, 1)
        ledger.validate_concert_by_artist(concert_id, artist_id)
        ledger.validate_concert_by_venue(concert_id, venue_id)
        ticket_id = ledger.buy_ticket(concert_id, 'eve', 5)

        assert ledger.use_ticket(ticket_id, 'eve', 0) is True

    def test_negative_timestamp_is_a_contract_error(self, validated_concert) -> None:
        ledger, concert_id, _, _ = validated_concert
        ticket_id = ledger.buy_ticket(concert_id, 'eve', 100)

        with pytest.raises(DomainError):
            ledger.use_ticket(ticket_id, 'eve', -1)


@pytest.mark.unit
class TestCashOut:
    def test_splits_revenue_by_venue_cut(self, make_validated_concert) -> None:
        ledger, concert_id, artist_id, venue_id = make_validated_concert(
            total_tickets=5, venue_cut_bps=1_000
        )
        ledger.buy_ticket(concert_id, 'a', 100)
        ledger.buy_ticket(concert_id, 'b', 100)

        assert ledger.cash_out(concert_id, DATE_TS) is True

        assert ledger.balance_venue(venue_id) == 20
        assert ledger.balance_artist(artist_id) == 180
        assert ledger.get_concert(concert_id).cashed_out is True

    def test_venue_cut_truncates(self, make_validated_concert) -> None:
        ledger, concert_id, artist_id, venue_id = make_validated_concert(
            total_tickets=1, venue_cut_bps=3_333
        )
        ledger.buy_ticket(concert_id, 'a', 10)

        ledger.cash_out(concert_id, DATE_TS)

        assert ledger.balance_venue(venue_id) == 3
        assert ledger.balance_artist(artist_id) == 7

    def test_cash_out_is_one_shot(self, validated_concert) -> None:
        ledger, concert_id, artist_id, venue_id = validated_concert
        ledger.buy_ticket(concert_id, 'a', 100)

        assert ledger.cash_out(concert_id, DATE_TS) is True
        assert ledger.cash_out(concert_id, DATE_TS + DAY) is False

        assert ledger.balance_artist(artist_id) == 90
        assert ledger.balance_venue(venue_id) == 10

    def test_cash_out_before_concert_fails(self, validated_concert) -> None:
        ledger, concert_id, artist_id, _ = validated_concert
        ledger.buy_ticket(concert_id, 'a', 100)

        assert ledger.cash_out(concert_id, DATE_TS - 1) is False
        assert ledger.get_concert(concert_id).cashed_out is False
        assert ledger.balance_artist(artist_id) == 0

    def test_cash_out_unknown_concert_fails(self, ledger: TicketingLedger) -> None:
        assert ledger.cash_out(1, DATE_TS) is False

    def test_cut_above_full_share_zeroes_artist(self, make_validated_concert) -> None:
        ledger, concert_id, artist_id, venue_id = make_validated_concert(
            total_tickets=1, venue_cut_bps=15_000
        )
        ledger.buy_ticket(concert_id, 'a', 100)

        assert ledger.cash_out(concert_id, DATE_TS) is True

        assert ledger.balance_venue(venue_id) == 150
        assert ledger.balance_artist(artist_id) == 0

    def test_missing_venue_counts_as_zero_cut(self, ledger: TicketingLedger) -> None:
        artist_id = ledger.create_artist('Touring', 'band')
        concert_id = ledger.create_concert(artist_id, 9, DATE_TS, 10, 2)
        ledger.validate_concert_by_artist(concert_id, artist_id)
        ledger.validate_concert_by_venue(concert_id, 9)
        ledger.buy_ticket(concert_id, 'a', 40)

        assert ledger.cash_out(concert_id, DATE_TS) is True

        assert ledger.balance_artist(artist_id) == 40
        assert ledger.balance_venue(9) == 0

    def test_balances_accumulate_across_concerts(self, validated_concert) -> None:
        ledger, first_concert, artist_id, venue_id = validated_concert
        second_concert = ledger.create_concert(artist_id, venue_id, DATE_TS + DAY, 50, 2)
        ledger.validate_concert_by_artist(second_concert, artist_id)
        ledger.validate_concert_by_venue(second_concert, venue_id)
        ledger.buy_ticket(first_concert, 'a', 100)
        ledger.buy_ticket(second_concert, 'b', 200)

        ledger.cash_out(first_concert, DATE_TS)
        ledger.cash_out(second_concert, DATE_TS + DAY)

        assert ledger.balance_artist(artist_id) == 90 + 180
        assert ledger.balance_venue(venue_id) == 10 + 20

    def test_free_tickets_contribute_nothing(self, validated_concert) -> None:
        ledger, concert_id, artist_id, venue_id = validated_concert
        ledger.emit_ticket(concert_id, artist_id)
        ledger.distribute_ticket(concert_id, artist_id, 'CODE')

        assert ledger.cash_out(concert_id, DATE_TS) is True

        assert ledger.balance_artist(artist_id) == 0
        assert ledger.balance_venue(venue_id) == 0

    def test_balances_of_unknown_parties_are_zero(self, ledger: TicketingLedger) -> None:
        assert ledger.balance_artist(1) == 0
        assert ledger.balance_venue(1) == 0


@pytest.mark.unit
class TestPayoutSplit:
    @pytest.mark.parametrize(
        'revenue,venue_cut_bps',
        [(0, 1_000), (200, 0), (200, 1_000), (10, 3_333), (999_999, 10_000)],
    )
    def test_cuts_add_up_to_revenue(self, revenue: int, venue_cut_bps: int) -> None:
        split = PayoutSplit.from_revenue(revenue=revenue, venue_cut_bps=venue_cut_bps)

        assert split.total == revenue

    def test_cut_above_full_share_overshoots_revenue(self) -> None:
        split = PayoutSplit.from_revenue(revenue=100, venue_cut_bps=15_000)

        assert split == PayoutSplit(venue_cut=150, artist_cut=0)
        assert split.total == 150
