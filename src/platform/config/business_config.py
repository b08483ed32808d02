"""Business rules and integer domains of the ticketing ledger."""

from typing import Final


class TicketingRules:
    """Fixed rules of the ticket lifecycle."""

    # Tickets may be used from this many seconds before the concert until it starts
    REDEMPTION_WINDOW_SECONDS: Final[int] = 86_400
    BPS_DENOMINATOR: Final[int] = 10_000
    ARTIST_OWNER_PREFIX: Final[str] = 'artist:'

    @staticmethod
    def artist_owner(artist_id: int) -> str:
        """Owner identity given to tickets an artist mints for themselves."""
        return f'{TicketingRules.ARTIST_OWNER_PREFIX}{artist_id}'


class IntegerWidth:
    """Upper bounds of the unsigned integer fields."""

    U16_MAX: Final[int] = 2**16 - 1
    U32_MAX: Final[int] = 2**32 - 1
    U64_MAX: Final[int] = 2**64 - 1
