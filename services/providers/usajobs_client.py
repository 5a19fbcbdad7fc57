"""
USAJobs API Client

Client for the USAJobs (US federal government) search API. Authenticates
with an Authorization-Key header and requires a User-Agent identifying the
caller.
"""

from __future__ import annotations

from typing import Any

import requests

from services.shared import USD, JobRecord, build_job_record, format_salary, parse_posted_date

from .base_client import BaseJobProviderClient, ProviderRequest

DEFAULT_USER_AGENT = "JobSearchApp/1.0"


class UsaJobsClient(BaseJobProviderClient):
    """Client for the USAJobs search API."""

    name = "usajobs"
    display_name = "USAJobs"
    currency = USD
    default_keywords = "software"
    default_location = "washington dc"

    def __init__(
        self,
        api_key: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize USAJobs API client.

        Args:
            api_key: USAJobs Authorization-Key
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        super().__init__(
            base_url="https://data.usajobs.gov/api",
            timeout=timeout,
            session=session,
        )
        self.api_key = api_key
        self.user_agent = user_agent

    def _build_request(
        self, keywords: str, location: str, page: int, results_per_page: int
    ) -> ProviderRequest:
        return ProviderRequest(
            url=f"{self.base_url}/search",
            params={"Keyword": keywords, "LocationName": location},
            headers={
                "Authorization-Key": self.api_key,
                "User-Agent": self.user_agent,
            },
        )

    def _extract_items(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        items = data["SearchResult"]["SearchResultItems"]
        return [item["MatchedObjectDescriptor"] for item in items]

    def _extract_total(self, data: dict[str, Any]) -> int:
        return int(data["SearchResult"].get("SearchResultCount") or 0)

    def _parse_job(self, item: dict[str, Any]) -> JobRecord:
        remuneration = (item.get("PositionRemuneration") or [{}])[0]
        details = (item.get("UserArea") or {}).get("Details") or {}
        apply_uris = item.get("ApplyURI") or []
        return build_job_record(
            id=item.get("MatchedObjectId"),
            title=item.get("PositionTitle"),
            company=item.get("OrganizationName"),
            location=item.get("PositionLocationDisplay"),
            salary=format_salary(
                remuneration.get("MinimumRange"), remuneration.get("MaximumRange"), self.currency
            ),
            description=details.get("JobSummary"),
            url=apply_uris[0] if apply_uris else item.get("PositionURI"),
            posted=parse_posted_date(item.get("PositionStartDate")),
            source=self.display_name,
        )
