"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against live Wikipedia"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Live browser tests"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests on the in-memory bridge"
    )
    config.addinivalue_line(
        "markers", "search: Tests related to the portal search box"
    )
    config.addinivalue_line(
        "markers", "language: Tests related to language selection"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add 'ui' / 'unit' markers from the test's directory."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Wikipedia UI Test Harness",
        "=" * 60,
        "",
    ]
