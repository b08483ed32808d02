from typing import Self

from dependency_injector.wiring import Provide, inject

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ledger_snapshot_repo import ILedgerSnapshotRepo
from src.service.ticketing.domain.aggregate.ticketing_ledger_aggregate import TicketingLedger


class RestoreLedgerUseCase:
    """
    Rebuild a ledger from the last saved snapshot.

    Id counters come back with the snapshot, so entities created after the
    restore never reuse an id handed out before it.
    """

    def __init__(self, *, snapshot_repo: ILedgerSnapshotRepo) -> None:
        self.snapshot_repo = snapshot_repo

    @classmethod
    @inject
    def depends(
        cls,
        snapshot_repo: ILedgerSnapshotRepo = Provide[Container.ledger_snapshot_repo],
    ) -> Self:
        return cls(snapshot_repo=snapshot_repo)

    @Logger.io
    def execute(self) -> TicketingLedger:
        snapshot = self.snapshot_repo.load()
        if snapshot is None:
            raise NotFoundError('Ledger snapshot not found')
        return TicketingLedger.from_snapshot(snapshot)
