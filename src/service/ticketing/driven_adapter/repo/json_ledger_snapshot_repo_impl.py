"""
JSON file implementation of ILedgerSnapshotRepo.

Writes go to a sibling temp file first and are then moved over the target,
so a crash mid-write leaves the previous snapshot intact.
"""

from pathlib import Path
from typing import Optional

import orjson

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ledger_snapshot_repo import ILedgerSnapshotRepo
from src.service.ticketing.domain.value_object.ledger_snapshot import LedgerSnapshot


class JsonLedgerSnapshotRepoImpl(ILedgerSnapshotRepo):
    def __init__(self, *, path: str | Path) -> None:
        self.path = Path(path)

    @Logger.io
    def save(self, *, snapshot: LedgerSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f'{self.path.name}.tmp')
        tmp_path.write_bytes(
            orjson.dumps(snapshot.to_dict(), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
        )
        tmp_path.replace(self.path)

    @Logger.io
    def load(self) -> Optional[LedgerSnapshot]:
        if not self.path.exists():
            return None
        try:
            data = orjson.loads(self.path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise DomainError(f'Ledger snapshot at {self.path} is not valid JSON: {e}') from e
        return LedgerSnapshot.from_dict(data)
