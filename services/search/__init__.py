"""
Search Services Package

- Single-provider search with fallback listings
- Concurrent combined search with deduplication
"""

from .dedupe import dedupe_jobs
from .fallback import FALLBACK_SOURCE, get_fallback_jobs
from .job_search_service import (
    DEFAULT_SOURCES,
    PROVIDER_ORDER,
    CombinedSearchOutcome,
    JobSearchService,
    ProviderSearchOutcome,
    UnknownProviderError,
    parse_sources,
)

__all__ = [
    "DEFAULT_SOURCES",
    "FALLBACK_SOURCE",
    "PROVIDER_ORDER",
    "CombinedSearchOutcome",
    "JobSearchService",
    "ProviderSearchOutcome",
    "UnknownProviderError",
    "dedupe_jobs",
    "get_fallback_jobs",
    "parse_sources",
]
