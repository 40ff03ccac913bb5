"""
Repository-level pytest configuration.

Sets up Loguru from the harness settings before collection so framework
log lines show up in pytest output and in the optional log file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wikitests.ui_testing.framework.log_config import init_logger


def pytest_configure(config):
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
