"""Test configuration and fixtures."""

import logfire
import pytest


@pytest.fixture(autouse=True, scope="session")
def quiet_logfire():
    """Keep Logfire local and silent during tests."""
    logfire.configure(send_to_logfire=False, console=False)
