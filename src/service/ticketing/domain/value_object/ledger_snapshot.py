"""
Ledger Snapshot - Value Object

The complete persisted shape of a ticketing ledger: four entity maps, two
balance maps and the id counters. A persistence collaborator must round-trip
this shape exactly, counters included, so ids are never reused after a restore.

JSON object keys are strings, so to_dict() writes every map key as a string
and from_dict() turns them back into integers.
"""

from typing import Any, Callable, Dict, Mapping, TypeVar

import attrs

from src.platform.config.business_config import IntegerWidth
from src.platform.exception.exceptions import DomainError
from src.platform.types.saturating_int import ensure_unsigned
from src.service.ticketing.domain.entity.artist_entity import Artist
from src.service.ticketing.domain.entity.concert_entity import Concert
from src.service.ticketing.domain.entity.ticket_entity import Ticket
from src.service.ticketing.domain.entity.venue_entity import Venue


ENTITY_KINDS = ('artist', 'venue', 'concert', 'ticket')

_E = TypeVar('_E')


@attrs.define(frozen=True)
class LedgerSnapshot:
    artists: Dict[int, Artist] = attrs.field(factory=dict)
    venues: Dict[int, Venue] = attrs.field(factory=dict)
    concerts: Dict[int, Concert] = attrs.field(factory=dict)
    tickets: Dict[int, Ticket] = attrs.field(factory=dict)
    balances_artist: Dict[int, int] = attrs.field(factory=dict)
    balances_venue: Dict[int, int] = attrs.field(factory=dict)
    # Next id to allocate per entity kind
    next_ids: Dict[str, int] = attrs.field(factory=lambda: dict.fromkeys(ENTITY_KINDS, 1))

    def __attrs_post_init__(self) -> None:
        if set(self.next_ids) != set(ENTITY_KINDS):
            raise DomainError(f'next_ids must cover exactly {", ".join(ENTITY_KINDS)}')
        for kind, entities in zip(
            ENTITY_KINDS, (self.artists, self.venues, self.concerts, self.tickets), strict=True
        ):
            ensure_unsigned(self.next_ids[kind], f'next_ids.{kind}')
            for key, entity in entities.items():
                if key != entity.id:  # type: ignore[attr-defined]
                    raise DomainError(f'{kind} stored under {key} carries id {entity.id}')  # type: ignore[attr-defined]
                if key >= self.next_ids[kind]:
                    raise DomainError(f'next_ids.{kind} would reuse existing id {key}')

    def to_dict(self) -> dict[str, Any]:
        return {
            'artists': _dump_entities(self.artists),
            'venues': _dump_entities(self.venues),
            'concerts': _dump_entities(self.concerts),
            'tickets': _dump_entities(self.tickets),
            'balances_artist': {str(key): value for key, value in self.balances_artist.items()},
            'balances_venue': {str(key): value for key, value in self.balances_venue.items()},
            'next_ids': dict(self.next_ids),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LedgerSnapshot':
        if not isinstance(data, Mapping):
            raise DomainError('Ledger snapshot must be a mapping')
        try:
            return cls(
                artists=_load_entities(data['artists'], Artist),
                venues=_load_entities(data['venues'], Venue),
                concerts=_load_entities(data['concerts'], Concert),
                tickets=_load_entities(data['tickets'], Ticket),
                balances_artist=_load_balances(data['balances_artist']),
                balances_venue=_load_balances(data['balances_venue']),
                next_ids=_load_next_ids(data['next_ids']),
            )
        except KeyError as e:
            raise DomainError(f'Ledger snapshot is missing {e.args[0]!r}') from e
        except (TypeError, ValueError) as e:
            raise DomainError(f'Malformed ledger snapshot: {e}') from e


def _dump_entities(entities: Mapping[int, Any]) -> dict[str, dict[str, Any]]:
    return {str(key): attrs.asdict(entity) for key, entity in entities.items()}


def _load_entities(raw: Mapping[str, Any], factory: Callable[..., _E]) -> Dict[int, _E]:
    _require_section(raw, factory.__name__)
    return {int(key): factory(**fields) for key, fields in raw.items()}


def _load_balances(raw: Mapping[str, Any]) -> Dict[int, int]:
    _require_section(raw, 'balances')
    return {
        int(key): ensure_unsigned(value, f'balance {key}', ceiling=IntegerWidth.U64_MAX)
        for key, value in raw.items()
    }


def _load_next_ids(raw: Mapping[str, Any]) -> Dict[str, int]:
    _require_section(raw, 'next_ids')
    return dict(raw)


def _require_section(raw: Any, section: str) -> None:
    if not isinstance(raw, Mapping):
        raise DomainError(f'Malformed ledger snapshot: {section} section must be a mapping')
