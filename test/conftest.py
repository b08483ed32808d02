"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the loguru
sinks and settings are configured at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402


@pytest.fixture
def wired_container() -> Iterator:
    container.wire(modules=WIRE_MODULES)
    yield container
    container.unwire()
    container.reset_singletons()
    container.ledger_snapshot_repo.reset_override()
