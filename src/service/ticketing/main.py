"""
Ticketing ledger runtime.

Hosts (CLI, RPC service, web handler) enter ledger_runtime() once at startup
to wire the persistence use cases, then restore or create a TicketingLedger.
The ledger itself is not thread-safe: a concurrent host must serialize every
call behind one lock around the whole ledger.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from src.platform.config.core_setting import settings
from src.platform.config.di import Container, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.restore_ledger_use_case import RestoreLedgerUseCase
from src.service.ticketing.domain.aggregate.ticketing_ledger_aggregate import TicketingLedger


@contextmanager
def ledger_runtime() -> Iterator[Container]:
    container.wire(modules=WIRE_MODULES)
    Logger.base.info(f'{settings.PROJECT_NAME} {settings.VERSION} started')
    try:
        yield container
    finally:
        container.unwire()


@Logger.io
def load_or_create_ledger() -> TicketingLedger:
    """Restore the last snapshot, or start an empty ledger when none exists"""
    try:
        return RestoreLedgerUseCase.depends().execute()
    except NotFoundError:
        Logger.base.info('No ledger snapshot found, starting empty ledger')
        return TicketingLedger()
