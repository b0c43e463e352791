"""Shared fixtures for live API tests.

These tests talk to the real Algolia HN Search API and only run when
HN_LIVE_TESTS=1 is set.
"""

import os

import pytest

from hackernews.utils.config import reset_settings


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless explicitly enabled."""
    if os.environ.get("HN_LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="set HN_LIVE_TESTS=1 to run live API tests")
    for item in items:
        if item.get_closest_marker("live"):
            item.add_marker(skip_live)


@pytest.fixture(autouse=True)
def setup_test_env():
    """Reset settings around every test."""
    reset_settings()

    yield

    reset_settings()
