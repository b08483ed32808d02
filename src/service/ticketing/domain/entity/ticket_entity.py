from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.ticketing.domain.validators import (
    FlagValidators,
    NumericValidators,
    StringValidators,
)


@attrs.define(frozen=True)
class Ticket:
    id: int = attrs.field(validator=NumericValidators.validate_u64)
    concert_id: int = attrs.field(validator=NumericValidators.validate_u64)
    # None means the ticket waits for someone to redeem its code
    owner: Optional[str] = attrs.field(validator=StringValidators.validate_optional_str)
    used: bool = attrs.field(default=False, validator=FlagValidators.validate_bool)
    # Ceiling for any future resale
    price_paid: int = attrs.field(default=0, validator=NumericValidators.validate_u64)
    minted_by_artist: bool = attrs.field(default=False, validator=FlagValidators.validate_bool)
    redeem_code: Optional[str] = attrs.field(
        default=None, validator=StringValidators.validate_optional_str
    )

    def is_held_by(self, identity: str) -> bool:
        return self.owner is not None and self.owner == identity

    def is_redeemable_with(self, code: str) -> bool:
        return self.owner is None and self.redeem_code is not None and self.redeem_code == code

    def change_owner(self, new_owner: str) -> 'Ticket':
        _require_holder(new_owner)
        return attrs.evolve(self, owner=new_owner)

    def resell(self, *, buyer: str, price: int) -> 'Ticket':
        _require_holder(buyer)
        return attrs.evolve(self, owner=buyer, price_paid=price)

    def mark_used(self) -> 'Ticket':
        return attrs.evolve(self, used=True)


def _require_holder(identity: object) -> None:
    # A claimed ticket never returns to the unowned state
    if not isinstance(identity, str):
        raise DomainError('new owner must be a string')
