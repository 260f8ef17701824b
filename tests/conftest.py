"""Shared pytest fixtures for all tests."""

import logging
import pytest

from config import Config
from services.base import Services
from storage.flat_file import AccountStore


@pytest.fixture(autouse=True)
def capture_app_logs(caplog):
    """Make INFO-level application messages visible to caplog."""
    caplog.set_level(logging.INFO, logger="bankbook")
    return caplog


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary account store.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "bankbook",
        store_path=tmp_path / "bankbook" / "accounts.txt",
        strict_load=False,
        currency_symbol="₹",
        log_level="DEBUG",
        log_dir=tmp_path / "bankbook" / "logs",
        enable_reset=False,
    )


@pytest.fixture
def store(test_config):
    """Create an AccountStore backed by the test config's store path."""
    return AccountStore.from_config(test_config)


@pytest.fixture
def services(test_config, store):
    """Create a Services container with a fresh, empty account store.

    Args:
        test_config: Test configuration fixture.
        store: Account store fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, store=store)
