"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import restore_ledger_use_case, save_ledger_use_case


WIRE_MODULES: list[ModuleType] = [
    save_ledger_use_case,
    restore_ledger_use_case,
]
