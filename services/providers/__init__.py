"""
Provider Clients Package

Clients for the external job-search APIs, all sharing one request/mapping
pipeline:
- Adzuna (global, UK market by default)
- Reed (UK)
- USAJobs (US federal government)
"""

from .adzuna_client import AdzunaClient
from .base_client import (
    BaseJobProviderClient,
    ProviderError,
    ProviderRequest,
    ProviderRequestError,
    ProviderResponseError,
    ProviderSearchResult,
)
from .reed_client import ReedClient
from .usajobs_client import UsaJobsClient

__all__ = [
    "AdzunaClient",
    "BaseJobProviderClient",
    "ProviderError",
    "ProviderRequest",
    "ProviderRequestError",
    "ProviderResponseError",
    "ProviderSearchResult",
    "ReedClient",
    "UsaJobsClient",
]
