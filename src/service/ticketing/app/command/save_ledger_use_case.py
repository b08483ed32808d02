from typing import Self

from dependency_injector.wiring import Provide, inject

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ledger_snapshot_repo import ILedgerSnapshotRepo
from src.service.ticketing.domain.aggregate.ticketing_ledger_aggregate import TicketingLedger
from src.service.ticketing.domain.value_object.ledger_snapshot import LedgerSnapshot


class SaveLedgerUseCase:
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
    def execute(self, *, ledger: TicketingLedger) -> LedgerSnapshot:
        snapshot = ledger.snapshot()
        self.snapshot_repo.save(snapshot=snapshot)
        Logger.base.info(
            f'Saved ledger snapshot: {len(snapshot.concerts)} concerts, {len(snapshot.tickets)} tickets'
        )
        return snapshot
