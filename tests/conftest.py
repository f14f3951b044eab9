"""Pytest configuration and shared fixtures for the blockdown test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import RecordingRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=300, deadline=None, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    """Provide a renderer that records every block it receives.

    Returns
    -------
    RecordingRenderer
        Fresh renderer with an empty call log.

    """
    return RecordingRenderer()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by ``configure_logging``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
