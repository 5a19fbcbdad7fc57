from collections.abc import Mapping
from typing import Any

from flask import current_app

from services.providers import AdzunaClient, ReedClient, UsaJobsClient
from services.rate_limiting import InMemoryRateLimitStore, RateLimiter
from services.search import JobSearchService

JOB_SEARCH_SERVICE_KEY = "job_search_service"
RATE_LIMITER_KEY = "rate_limiter"


def build_job_search_service(config: Mapping[str, Any]) -> JobSearchService:
    """
    Build the JobSearchService with one client per provider.

    Args:
        config: Flask config (or any mapping with the same keys)

    Returns:
        JobSearchService instance
    """
    timeout = config["PROVIDER_REQUEST_TIMEOUT"]
    clients = {
        "adzuna": AdzunaClient(
            app_id=config["ADZUNA_APP_ID"],
            app_key=config["ADZUNA_APP_KEY"],
            country=config["ADZUNA_COUNTRY"],
            timeout=timeout,
        ),
        "reed": ReedClient(api_key=config["REED_API_KEY"], timeout=timeout),
        "usajobs": UsaJobsClient(
            api_key=config["USAJOBS_API_KEY"],
            user_agent=config["USAJOBS_USER_AGENT"],
            timeout=timeout,
        ),
    }
    return JobSearchService(clients=clients)


def build_rate_limiter(config: Mapping[str, Any]) -> RateLimiter:
    """
    Build the per-client rate limiter backed by a fresh in-memory store.

    Args:
        config: Flask config (or any mapping with the same keys)

    Returns:
        RateLimiter instance
    """
    return RateLimiter(
        store=InMemoryRateLimitStore(),
        points=config["RATE_LIMIT_POINTS"],
        duration=config["RATE_LIMIT_DURATION"],
    )


def provider_credentials(config: Mapping[str, Any]) -> dict[str, Any]:
    """Primary credential per provider, as reported by the health check."""
    return {
        "adzuna": config.get("ADZUNA_APP_ID"),
        "reed": config.get("REED_API_KEY"),
        "usajobs": config.get("USAJOBS_API_KEY"),
    }


def get_job_search_service() -> JobSearchService:
    """
    Get the JobSearchService attached to the running app.

    Returns:
        JobSearchService instance
    """
    return current_app.extensions[JOB_SEARCH_SERVICE_KEY]


def get_rate_limiter() -> RateLimiter:
    """
    Get the RateLimiter attached to the running app.

    Returns:
        RateLimiter instance
    """
    return current_app.extensions[RATE_LIMITER_KEY]
