"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.ledger_snapshot import LedgerSnapshot
from src.service.ticketing.domain.value_object.payout_split import PayoutSplit

__all__ = ['LedgerSnapshot', 'PayoutSplit']
