"""
Shared test configuration for egnumbers.

Keeps every test independent of the developer's environment: settings
caches are cleared and EGNUMBERS_* variables removed around each test.
"""

import os
from datetime import date

import pytest


# =============================================================================
# ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run each test without EGNUMBERS_* env vars, YAML files or cached settings."""
    from egnumbers.config import get_settings

    for key in list(os.environ):
        if key.startswith("EGNUMBERS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# SAMPLE DATA
# =============================================================================

@pytest.fixture
def reference_date():
    """Fixed 'today' for age calculations."""
    return date(2024, 6, 1)


@pytest.fixture
def sample_ids():
    """Cairo 1990 (male), Giza 2004-02-29 (female) and a non-existent 2005-02-29."""
    return ["29001010100015", "30402292101236", "30502292101234"]


@pytest.fixture
def valid_cards():
    """Well-known test PANs per network."""
    return {
        "Visa": "4111111111111111",
        "Mastercard": "5555555555554444",
        "American Express": "378282246310005",
        "Discover": "6011111111111117",
        "JCB": "3530111333300000",
        "Diners Club": "30569309025904",
    }
