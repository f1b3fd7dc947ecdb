"""Pytest configuration and shared fixtures."""

import pytest

from lazyinject.core import Injector
from lazyinject.logging_config import configure_logging
from lazyinject.settings import InjectorSettings


def pytest_configure(config):
    """Configure logging so injector debug events render during tests."""
    configure_logging(InjectorSettings(log_level="DEBUG"))


@pytest.fixture
def injector() -> Injector:
    return Injector()
