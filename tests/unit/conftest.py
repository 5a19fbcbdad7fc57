"""
Pytest configuration and fixtures for unit tests.

Unit tests are fast, isolated tests that don't require network access:
every provider client gets a MagicMock session.
"""

from unittest.mock import MagicMock

import pytest

from services.providers import AdzunaClient, ReedClient, UsaJobsClient


@pytest.fixture
def mock_session():
    """Mock requests.Session."""
    return MagicMock()


@pytest.fixture
def adzuna_client(mock_session):
    return AdzunaClient(app_id="test-id", app_key="test-key", session=mock_session)


@pytest.fixture
def reed_client(mock_session):
    return ReedClient(api_key="test-reed-key", session=mock_session)


@pytest.fixture
def usajobs_client(mock_session):
    return UsaJobsClient(api_key="test-usajobs-key", session=mock_session)
