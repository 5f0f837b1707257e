"""Pytest configuration and shared fixtures for the htmltable test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import logging
from typing import Generator

import pytest

from htmltable import Table

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def people_header() -> dict:
    """Provide a header keyed by column name.

    Returns
    -------
    dict
        Header values for the ``name`` and ``city`` columns.

    """
    return {"name": "Name", "city": "City"}


@pytest.fixture
def people_rows() -> list[dict]:
    """Provide body rows whose key order differs from the header."""
    return [
        {"city": "NYC", "name": "Jo"},
        {"name": "Ann", "city": "Dallas"},
    ]


@pytest.fixture
def people_table(people_header, people_rows) -> Table:
    """Provide a table with a header and two body rows."""
    return Table().set_header(people_header).set_body(people_rows)


@pytest.fixture(autouse=True)
def restore_package_logging() -> Generator[None, None, None]:
    """Restore the htmltable logger after configure_logging() changed it."""
    package_logger = logging.getLogger("htmltable")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    try:
        yield
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
