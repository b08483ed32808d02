"""
Ticketing Ledger - Aggregate Root for Concert Ticketing

[DDD Design Principles]
- TicketingLedger is the Aggregate Root and the single authoritative store
- Artist, Venue, Concert and Ticket are frozen entities inside the aggregate;
  every change replaces the stored entity, so nothing handed out can mutate it
- Balances are plain integer maps keyed by artist and venue id

[Business Invariants]
- tickets_issued <= total_tickets for every concert
- Tickets are only issued for concerts validated by both artist and venue
- A ticket is used at most once, a concert is cashed out at most once
- Resale never exceeds what the seller paid
- Ids start at 1 per entity kind and are never reused

[Failure Contract]
- Updates on unknown ids and validations by the wrong party are silent no-ops
- Business rejections return None / False and never raise; the reason is
  logged at DEBUG
- Arguments outside their unsigned integer domain raise DomainError
- Every rule is checked before anything is written
"""

from typing import Dict, Optional

import attrs

from src.platform.config.business_config import IntegerWidth, TicketingRules
from src.platform.logging.loguru_io import Logger
from src.platform.types.saturating_int import ensure_unsigned, saturating_add
from src.service.ticketing.domain.entity.artist_entity import Artist
from src.service.ticketing.domain.entity.concert_entity import Concert
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.entity.venue_entity import Venue
from src.service.ticketing.domain.value_object.ledger_snapshot import ENTITY_KINDS, LedgerSnapshot
from src.service.ticketing.domain.value_object.payout_split import PayoutSplit


@attrs.define
class TicketingLedger:
    _artists: Dict[int, Artist] = attrs.field(factory=dict)
    _venues: Dict[int, Venue] = attrs.field(factory=dict)
    _concerts: Dict[int, Concert] = attrs.field(factory=dict)
    _tickets: Dict[int, Ticket] = attrs.field(factory=dict)
    _balances_artist: Dict[int, int] = attrs.field(factory=dict)
    _balances_venue: Dict[int, int] = attrs.field(factory=dict)
    _next_ids: Dict[str, int] = attrs.field(factory=lambda: dict.fromkeys(ENTITY_KINDS, 1))

    # ------------------------------------------------------------------
    # Artists and venues
    # ------------------------------------------------------------------

    @Logger.io
    def create_artist(self, name: str, artist_type: str) -> int:
        artist = Artist(id=self._peek_id('artist'), name=name, artist_type=artist_type)
        self._artists[artist.id] = artist
        self._advance_id('artist')
        return artist.id

    @Logger.io
    def update_artist(self, artist_id: int, name: str, artist_type: str) -> None:
        artist = self._artists.get(artist_id)
        if artist is None:
            return
        self._artists[artist_id] = artist.rename(name=name, artist_type=artist_type)

    @Logger.io
    def create_venue(
        self,
        name: str,
        capacity: int,
        venue_cut_bps: int,
        next_concert_date: Optional[int] = None,
    ) -> int:
        venue = Venue(
            id=self._peek_id('venue'),
            name=name,
            capacity=capacity,
            venue_cut_bps=venue_cut_bps,
            next_concert_date=next_concert_date,
        )
        self._venues[venue.id] = venue
        self._advance_id('venue')
        return venue.id

    @Logger.io
    def update_venue(
        self,
        venue_id: int,
        name: str,
        capacity: int,
        venue_cut_bps: int,
        next_concert_date: Optional[int] = None,
    ) -> None:
        venue = self._venues.get(venue_id)
        if venue is None:
            return
        self._venues[venue_id] = venue.update_details(
            name=name,
            capacity=capacity,
            venue_cut_bps=venue_cut_bps,
            next_concert_date=next_concert_date,
        )

    # ------------------------------------------------------------------
    # Concerts
    # ------------------------------------------------------------------

    @Logger.io
    def create_concert(
        self,
        artist_id: int,
        venue_id: int,
        date_ts: int,
        ticket_price: int,
        total_tickets: int,
    ) -> int:
        # Artist and venue are soft references; their existence is not checked here
        concert = Concert(
            id=self._peek_id('concert'),
            artist_id=artist_id,
            venue_id=venue_id,
            date_ts=date_ts,
            ticket_price=ticket_price,
            total_tickets=total_tickets,
        )
        self._concerts[concert.id] = concert
        self._advance_id('concert')
        return concert.id

    @Logger.io
    def validate_concert_by_artist(self, concert_id: int, artist_id: int) -> None:
        concert = self._concerts.get(concert_id)
        if concert is None or concert.artist_id != artist_id:
            return
        self._concerts[concert_id] = concert.mark_validated_by_artist()

    @Logger.io
    def validate_concert_by_venue(self, concert_id: int, venue_id: int) -> None:
        concert = self._concerts.get(concert_id)
        if concert is None or concert.venue_id != venue_id:
            return
        self._concerts[concert_id] = concert.mark_validated_by_venue()

    # ------------------------------------------------------------------
    # Ticket issuance
    # ------------------------------------------------------------------

    @Logger.io
    def emit_ticket(
        self, concert_id: int, artist_id: int, redeem_code: Optional[str] = None
    ) -> Optional[int]:
        concert = self._issuable_concert('emit_ticket', concert_id, artist_id=artist_id)
        if concert is None:
            return None

        ticket = Ticket(
            id=self._peek_id('ticket'),
            concert_id=concert_id,
            owner=TicketingRules.artist_owner(artist_id),
            price_paid=0,
            minted_by_artist=True,
            redeem_code=redeem_code,
        )
        self._store_new_ticket(ticket)
        self._concerts[concert_id] = concert.record_issue()
        Logger.base.info(f'Artist {artist_id} minted ticket {ticket.id} for concert {concert_id}')
        return ticket.id

    @Logger.io
    def buy_ticket(self, concert_id: int, buyer: str, amount_paid: int) -> Optional[int]:
        ensure_unsigned(amount_paid, 'amount_paid')
        concert = self._issuable_concert('buy_ticket', concert_id)
        if concert is None:
            return None

        ticket = Ticket(
            id=self._peek_id('ticket'),
            concert_id=concert_id,
            owner=buyer,
            price_paid=amount_paid,
            minted_by_artist=False,
        )
        self._store_new_ticket(ticket)
        self._concerts[concert_id] = concert.record_sale(amount_paid)
        artist = self._artists.get(concert.artist_id)
        if artist is not None:
            self._artists[artist.id] = artist.record_ticket_sold()
        Logger.base.info(f'Sold ticket {ticket.id} for concert {concert_id} at {amount_paid}')
        return ticket.id

    @Logger.io
    def distribute_ticket(self, concert_id: int, artist_id: int, redeem_code: str) -> Optional[int]:
        concert = self._issuable_concert('distribute_ticket', concert_id, artist_id=artist_id)
        if concert is None:
            return None

        ticket = Ticket(
            id=self._peek_id('ticket'),
            concert_id=concert_id,
            owner=None,
            price_paid=0,
            minted_by_artist=True,
            redeem_code=redeem_code,
        )
        self._store_new_ticket(ticket)
        self._concerts[concert_id] = concert.record_issue()
        Logger.base.info(f'Distributed redeemable ticket {ticket.id} for concert {concert_id}')
        return ticket.id

    # ------------------------------------------------------------------
    # Transfer, resale and redemption
    # ------------------------------------------------------------------

    @Logger.io
    def transfer_ticket(self, ticket_id: int, from_owner: str, to_owner: str) -> bool:
        ticket = self._transferable_ticket('transfer_ticket', ticket_id, from_owner)
        if ticket is None:
            return False
        self._tickets[ticket_id] = ticket.change_owner(to_owner)
        return True

    @Logger.io
    def trade_ticket(self, ticket_id: int, seller: str, buyer: str, price: int) -> bool:
        ensure_unsigned(price, 'price')
        ticket = self._transferable_ticket('trade_ticket', ticket_id, seller)
        if ticket is None:
            return False
        if price > ticket.price_paid:
            self._reject('trade_ticket', f'price {price} exceeds ceiling {ticket.price_paid}')
            return False
        self._tickets[ticket_id] = ticket.resell(buyer=buyer, price=price)
        return True

    @Logger.io
    def redeem_ticket(self, code: str, user: str) -> Optional[int]:
        # Dict order is creation order, so the oldest matching ticket wins
        for ticket_id, ticket in self._tickets.items():
            if ticket.is_redeemable_with(code):
                self._tickets[ticket_id] = ticket.change_owner(user)
                Logger.base.info(f'Ticket {ticket_id} redeemed by {user}')
                return ticket_id
        self._reject('redeem_ticket', 'no unclaimed ticket carries this code')
        return None

    # ------------------------------------------------------------------
    # Consumption and settlement
    # ------------------------------------------------------------------

    @Logger.io
    def use_ticket(self, ticket_id: int, owner: str, now_ts: int) -> bool:
        ensure_unsigned(now_ts, 'now_ts')
        ticket = self._tickets.get(ticket_id)
        if ticket is None:
            self._reject('use_ticket', f'ticket {ticket_id} does not exist')
            return False
        if not ticket.is_held_by(owner):
            self._reject('use_ticket', f'ticket {ticket_id} is not held by {owner}')
            return False
        if ticket.used:
            self._reject('use_ticket', f'ticket {ticket_id} was already used')
            return False

        concert = self._concerts.get(ticket.concert_id)
        if concert is None:
            self._reject('use_ticket', f'concert {ticket.concert_id} does not exist')
            return False
        if not concert.is_fully_validated:
            self._reject('use_ticket', f'concert {concert.id} is not validated by both parties')
            return False
        if not concert.is_within_redemption_window(now_ts):
            self._reject('use_ticket', f'{now_ts} is outside the window ending at {concert.date_ts}')
            return False

        self._tickets[ticket_id] = ticket.mark_used()
        return True

    @Logger.io
    def cash_out(self, concert_id: int, now_ts: int) -> bool:
        ensure_unsigned(now_ts, 'now_ts')
        concert = self._concerts.get(concert_id)
        if concert is None:
            self._reject('cash_out', f'concert {concert_id} does not exist')
            return False
        if concert.cashed_out:
            self._reject('cash_out', f'concert {concert_id} was already cashed out')
            return False
        if not concert.has_started(now_ts):
            self._reject('cash_out', f'concert {concert_id} starts at {concert.date_ts}')
            return False

        venue = self._venues.get(concert.venue_id)
        split = PayoutSplit.from_revenue(
            revenue=concert.revenue,
            venue_cut_bps=venue.venue_cut_bps if venue is not None else 0,
        )
        self._balances_artist[concert.artist_id] = saturating_add(
            self._balances_artist.get(concert.artist_id, 0), split.artist_cut
        )
        self._balances_venue[concert.venue_id] = saturating_add(
            self._balances_venue.get(concert.venue_id, 0), split.venue_cut
        )
        self._concerts[concert_id] = concert.mark_cashed_out()
        Logger.base.info(
            f'Concert {concert_id} cashed out: artist {split.artist_cut}, venue {split.venue_cut}'
        )
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def ticket_owner(self, ticket_id: int) -> Optional[str]:
        ticket = self._tickets.get(ticket_id)
        return ticket.owner if ticket is not None else None

    def balance_artist(self, artist_id: int) -> int:
        return self._balances_artist.get(artist_id, 0)

    def balance_venue(self, venue_id: int) -> int:
        return self._balances_venue.get(venue_id, 0)

    def get_artist(self, artist_id: int) -> Optional[Artist]:
        return self._artists.get(artist_id)

    def get_venue(self, venue_id: int) -> Optional[Venue]:
        return self._venues.get(venue_id)

    def get_concert(self, concert_id: int) -> Optional[Concert]:
        return self._concerts.get(concert_id)

    def get_ticket(self, ticket_id: int) -> Optional[Ticket]:
        return self._tickets.get(ticket_id)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(
            artists=dict(self._artists),
            venues=dict(self._venues),
            concerts=dict(self._concerts),
            tickets=dict(self._tickets),
            balances_artist=dict(self._balances_artist),
            balances_venue=dict(self._balances_venue),
            next_ids=dict(self._next_ids),
        )

    @classmethod
    @Logger.io
    def from_snapshot(cls, snapshot: LedgerSnapshot) -> 'TicketingLedger':
        return cls(
            artists=dict(snapshot.artists),
            venues=dict(snapshot.venues),
            concerts=dict(snapshot.concerts),
            tickets=dict(snapshot.tickets),
            balances_artist=dict(snapshot.balances_artist),
            balances_venue=dict(snapshot.balances_venue),
            next_ids=dict(snapshot.next_ids),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _peek_id(self, kind: str) -> int:
        return self._next_ids[kind]

    def _advance_id(self, kind: str) -> None:
        self._next_ids[kind] = saturating_add(self._next_ids[kind], 1, ceiling=IntegerWidth.U64_MAX)

    def _store_new_ticket(self, ticket: Ticket) -> None:
        self._tickets[ticket.id] = ticket
        self._advance_id('ticket')

    def _issuable_concert(
        self, operation: str, concert_id: int, *, artist_id: Optional[int] = None
    ) -> Optional[Concert]:
        """Shared supply gate of the three issuance paths; None means rejected."""
        concert = self._concerts.get(concert_id)
        if concert is None:
            self._reject(operation, f'concert {concert_id} does not exist')
            return None
        if artist_id is not None and concert.artist_id != artist_id:
            self._reject(operation, f'artist {artist_id} does not own concert {concert_id}')
            return None
        if not concert.is_fully_validated:
            self._reject(operation, f'concert {concert_id} is not validated by both parties')
            return None
        if concert.is_sold_out:
            self._reject(operation, f'concert {concert_id} has no tickets left')
            return None
        return concert

    def _transferable_ticket(self, operation: str, ticket_id: int, holder: str) -> Optional[Ticket]:
        ticket = self._tickets.get(ticket_id)
        if ticket is None:
            self._reject(operation, f'ticket {ticket_id} does not exist')
            return None
        if not ticket.is_held_by(holder):
            self._reject(operation, f'ticket {ticket_id} is not held by {holder}')
            return None
        if ticket.used:
            self._reject(operation, f'ticket {ticket_id} was already used')
            return None
        return ticket

    @staticmethod
    def _reject(operation: str, reason: str) -> None:
        Logger.base.debug(f'{operation} rejected: {reason}')
