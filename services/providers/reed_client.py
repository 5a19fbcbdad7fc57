"""
Reed API Client

Client for the Reed UK jobs API. Reed uses HTTP Basic auth with the API key
as the username and an empty password.
"""

from __future__ import annotations

from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from services.shared import GBP, JobRecord, build_job_record, format_salary, parse_posted_date

from .base_client import BaseJobProviderClient, ProviderRequest


class ReedClient(BaseJobProviderClient):
    """Client for the Reed search API."""

    name = "reed"
    display_name = "Reed"
    currency = GBP

    def __init__(
        self,
        api_key: str,
        timeout: float = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize Reed API client.

        Args:
            api_key: Reed API key
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        super().__init__(
            base_url="https://www.reed.co.uk/api/1.0",
            timeout=timeout,
            session=session,
        )
        self.api_key = api_key
        self.auth = HTTPBasicAuth(api_key, "")

    def _build_request(
        self, keywords: str, location: str, page: int, results_per_page: int
    ) -> ProviderRequest:
        # Reed pages with resultsToSkip; the first page is the only one requested here.
        return ProviderRequest(
            url=f"{self.base_url}/search",
            params={"keywords": keywords, "locationName": location},
            auth=self.auth,
        )

    def _extract_items(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        return data["results"]

    def _extract_total(self, data: dict[str, Any]) -> int:
        return int(data.get("totalResults") or 0)

    def _parse_job(self, item: dict[str, Any]) -> JobRecord:
        return build_job_record(
            id=item.get("jobId"),
            title=item.get("jobTitle"),
            company=item.get("employerName"),
            location=item.get("locationName"),
            salary=format_salary(
                item.get("minimumSalary"), item.get("maximumSalary"), self.currency
            ),
            description=item.get("jobDescription"),
            url=item.get("jobUrl"),
            # Reed sends dates as DD/MM/YYYY
            posted=parse_posted_date(item.get("date"), dayfirst=True),
            source=self.display_name,
        )
