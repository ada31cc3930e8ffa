"""Pytest configuration for integration tests."""

import os

import pytest


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def live_credentials():
    """Credentials of an existing account on the API under test."""
    email = os.environ.get("TREINO_TEST_EMAIL")
    password = os.environ.get("TREINO_TEST_PASSWORD")
    if not email or not password:
        pytest.skip("TREINO_TEST_EMAIL / TREINO_TEST_PASSWORD not set")
    return email, password
