from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.value_object.ledger_snapshot import LedgerSnapshot


class ILedgerSnapshotRepo(ABC):
    """Persistence collaborator that stores whole-ledger snapshots"""

    @abstractmethod
    def save(self, *, snapshot: LedgerSnapshot) -> None:
        pass

    @abstractmethod
    def load(self) -> Optional[LedgerSnapshot]:
        """Return the stored snapshot, or None when nothing was saved yet"""
        pass
