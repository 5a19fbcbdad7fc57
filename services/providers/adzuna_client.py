"""
Adzuna API Client

Client for the Adzuna job search API. Authenticates with app id/key query
parameters and searches a single country market (UK by default).
"""

from __future__ import annotations

from typing import Any

import requests

from services.shared import GBP, USD, JobRecord, build_job_record, format_salary, parse_posted_date

from .base_client import BaseJobProviderClient, ProviderRequest

# Markets priced in pounds; everything else is shown in dollars.
GBP_COUNTRIES = {"gb"}


class AdzunaClient(BaseJobProviderClient):
    """Client for the Adzuna search API."""

    name = "adzuna"
    display_name = "Adzuna"

    def __init__(
        self,
        app_id: str,
        app_key: str,
        country: str = "gb",
        timeout: float = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize Adzuna API client.

        Args:
            app_id: Adzuna application id
            app_key: Adzuna application key
            country: Two-letter Adzuna market code (e.g., "gb", "us")
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session
        """
        super().__init__(
            base_url="https://api.adzuna.com/v1/api/jobs",
            timeout=timeout,
            session=session,
        )
        self.app_id = app_id
        self.app_key = app_key
        self.country = country.lower()
        self.currency = GBP if self.country in GBP_COUNTRIES else USD

    def _build_request(
        self, keywords: str, location: str, page: int, results_per_page: int
    ) -> ProviderRequest:
        return ProviderRequest(
            url=f"{self.base_url}/{self.country}/search/{page}",
            params={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "what": keywords,
                "where": location,
                "results_per_page": results_per_page,
                "content-type": "application/json",
            },
        )

    def _extract_items(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        return data["results"]

    def _extract_total(self, data: dict[str, Any]) -> int:
        return int(data.get("count") or 0)

    def _parse_job(self, item: dict[str, Any]) -> JobRecord:
        company = item.get("company") or {}
        location = item.get("location") or {}
        return build_job_record(
            id=item.get("id"),
            title=item.get("title"),
            company=company.get("display_name"),
            location=location.get("display_name"),
            salary=format_salary(item.get("salary_min"), item.get("salary_max"), self.currency),
            description=item.get("description"),
            url=item.get("redirect_url"),
            posted=parse_posted_date(item.get("created")),
            source=self.display_name,
        )
