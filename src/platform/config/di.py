"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticketing.driven_adapter.repo.json_ledger_snapshot_repo_impl import (
    JsonLedgerSnapshotRepoImpl,
)


class Container(containers.DeclarativeContainer):
    config_service = providers.Singleton(Settings)

    ledger_snapshot_repo = providers.Singleton(
        JsonLedgerSnapshotRepoImpl,
        path=config_service.provided.LEDGER_SNAPSHOT_PATH,
    )


container = Container()
