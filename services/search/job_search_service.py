"""Job Search Service.

Runs searches against the configured provider clients. Single-provider
searches degrade to placeholder listings when the provider fails; combined
searches fan out to several providers concurrently and merge the results.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from services.providers import BaseJobProviderClient, ProviderError
from services.providers.base_client import DEFAULT_PAGE, DEFAULT_RESULTS_PER_PAGE
from services.shared import JobRecord

from .dedupe import dedupe_jobs
from .fallback import get_fallback_jobs

logger = logging.getLogger(__name__)

# Merge precedence for combined searches.
PROVIDER_ORDER = ("adzuna", "reed", "usajobs")
DEFAULT_SOURCES = ",".join(PROVIDER_ORDER)


class UnknownProviderError(ValueError):
    """Raised when a search names a provider that is not configured."""


@dataclass
class ProviderSearchOutcome:
    """Result of a single-provider search, successful or degraded."""

    success: bool
    jobs: list[JobRecord]
    total: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            payload["error"] = self.error
        payload["jobs"] = [job.to_dict() for job in self.jobs]
        if self.total is not None:
            payload["total"] = self.total
        return payload


@dataclass
class CombinedSearchOutcome:
    jobs: list[JobRecord]
    sources: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.jobs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "jobs": [job.to_dict() for job in self.jobs],
            "total": self.total,
            "sources": self.sources,
        }


def parse_sources(sources: str | None) -> list[str]:
    """Split a comma-separated provider list, dropping blank entries."""
    if sources is None:
        sources = DEFAULT_SOURCES
    return [name.strip() for name in sources.split(",") if name.strip()]


class JobSearchService:
    """
    Service for searching jobs across provider clients.

    Holds one client per provider name; clients are shared between
    requests and never mutated after construction.
    """

    def __init__(self, clients: dict[str, BaseJobProviderClient]):
        """Initialize the job search service.

        Args:
            clients: Provider clients keyed by provider name ("adzuna", ...)
        """
        if not clients:
            raise ValueError("At least one provider client is required")
        self.clients = clients

    def get_client(self, provider: str) -> BaseJobProviderClient:
        client = self.clients.get(provider)
        if client is None:
            raise UnknownProviderError(f"Unknown provider: {provider}")
        return client

    def search_provider(
        self,
        provider: str,
        keywords: str | None = None,
        location: str | None = None,
        page: int = DEFAULT_PAGE,
        results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
    ) -> ProviderSearchOutcome:
        """
        Search a single provider, falling back to placeholder jobs on failure.

        Args:
            provider: Provider name
            keywords: Search keywords as sent by the caller
            location: Search location as sent by the caller
            page: Results page
            results_per_page: Page size

        Returns:
            Successful outcome with the provider total, or a failed outcome
            carrying a fixed error message and the fallback jobs

        Raises:
            UnknownProviderError: If no client is configured for the provider
        """
        client = self.get_client(provider)

        try:
            result = client.search(
                keywords=keywords,
                location=location,
                page=page,
                results_per_page=results_per_page,
            )
        except ProviderError as e:
            logger.error(f"{client.display_name} API error: {e.detail}")
            return ProviderSearchOutcome(
                success=False,
                error=f"Failed to fetch jobs from {client.display_name}",
                jobs=get_fallback_jobs(keywords, location, client.display_name),
            )

        return ProviderSearchOutcome(success=True, jobs=result.jobs, total=result.total)

    def search_all(
        self,
        keywords: str | None = None,
        location: str | None = None,
        sources: str | None = None,
    ) -> CombinedSearchOutcome:
        """
        Search several providers concurrently and merge the results.

        Every selected provider runs in its own worker and the call returns
        once all of them have settled. A provider whose search raises
        contributes no jobs. Jobs are merged in PROVIDER_ORDER and
        deduplicated by (title, company).

        Fallback jobs are identical across providers, so when every provider
        fails only the first provider's three fallback jobs survive and the
        outcome does not say that all providers failed.

        Args:
            keywords: Search keywords
            location: Search location
            sources: Comma-separated provider names, all providers by default

        Returns:
            CombinedSearchOutcome with the deduplicated jobs and the parsed source list
        """
        source_list = parse_sources(sources)
        selected = [
            name for name in PROVIDER_ORDER if name in source_list and name in self.clients
        ]
        logger.info(f"Combined search on {selected} (requested {source_list})")

        merged: list[JobRecord] = []
        if selected:
            with ThreadPoolExecutor(max_workers=len(selected)) as executor:
                futures = {
                    name: executor.submit(
                        self.search_provider, name, keywords=keywords, location=location
                    )
                    for name in selected
                }
                for name in selected:
                    try:
                        merged.extend(futures[name].result().jobs)
                    except Exception as e:
                        logger.error(f"Search on {name} failed, skipping: {e}", exc_info=True)

        unique = dedupe_jobs(merged)
        logger.info(f"Combined search merged {len(merged)} job(s) into {len(unique)}")
        return CombinedSearchOutcome(jobs=unique, sources=source_list)
