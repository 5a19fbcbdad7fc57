"""
Pytest configuration and fixtures for integration tests.

Integration tests drive the Flask app through its test client with real
services wired together; only the provider HTTP sessions are mocked.
All tests in this directory should be marked with @pytest.mark.integration
"""

from unittest.mock import MagicMock

import pytest

from backend.app import create_app
from backend.config import Config
from services.providers import AdzunaClient, ReedClient, UsaJobsClient
from services.rate_limiting import InMemoryRateLimitStore, RateLimiter
from services.search import JobSearchService


class IntegrationConfig(Config):
    TESTING = True
    ADZUNA_APP_ID = "test-adzuna-id"
    ADZUNA_APP_KEY = "test-adzuna-key"
    REED_API_KEY = "test-reed-key"
    USAJOBS_API_KEY = "test-usajobs-key"
    RATE_LIMIT_POINTS = 10
    RATE_LIMIT_DURATION = 60
    CORS_ORIGINS = "*"


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def sessions():
    """One mocked requests session per provider."""
    return {"adzuna": MagicMock(), "reed": MagicMock(), "usajobs": MagicMock()}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_app(sessions, clock):
    """Create a Flask test app with mocked provider sessions."""
    clients = {
        "adzuna": AdzunaClient(
            app_id=IntegrationConfig.ADZUNA_APP_ID,
            app_key=IntegrationConfig.ADZUNA_APP_KEY,
            session=sessions["adzuna"],
        ),
        "reed": ReedClient(api_key=IntegrationConfig.REED_API_KEY, session=sessions["reed"]),
        "usajobs": UsaJobsClient(
            api_key=IntegrationConfig.USAJOBS_API_KEY, session=sessions["usajobs"]
        ),
    }
    rate_limiter = RateLimiter(
        store=InMemoryRateLimitStore(clock=clock),
        points=IntegrationConfig.RATE_LIMIT_POINTS,
        duration=IntegrationConfig.RATE_LIMIT_DURATION,
    )
    return create_app(
        IntegrationConfig,
        job_search_service=JobSearchService(clients=clients),
        rate_limiter=rate_limiter,
    )


@pytest.fixture
def test_client(test_app):
    """Create a Flask test client."""
    return test_app.test_client()


@pytest.fixture
def integration_config():
    """Config class used by the test app, for tests that build their own app."""
    return IntegrationConfig
