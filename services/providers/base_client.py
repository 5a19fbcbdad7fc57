"""
Base Job Provider Client

Abstract base class for job-search provider clients with common functionality:
- One outbound call per search (no retries)
- Error handling collapsed into a single ProviderError class
- Field mapping into the unified JobRecord shape
- Logging with credentials stripped
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import requests

from services.shared import JobRecord, get_structured_logger

DEFAULT_KEYWORDS = "software engineer"
DEFAULT_LOCATION = "london"
DEFAULT_PAGE = 1
DEFAULT_RESULTS_PER_PAGE = 20

SENSITIVE_PARAMS = {"app_id", "app_key", "api_key", "token"}


class ProviderError(Exception):
    """Raised when a provider search cannot produce results."""

    def __init__(self, provider: str, message: str, detail: Any = None):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.detail = detail if detail is not None else message


class ProviderRequestError(ProviderError):
    """Transport failure, non-2xx status or a body that is not JSON."""


class ProviderResponseError(ProviderError):
    """The provider answered with JSON that does not have the expected shape."""


@dataclass
class ProviderRequest:
    """Everything needed to issue one provider call."""

    url: str
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    auth: Any = None


@dataclass
class ProviderSearchResult:
    jobs: list[JobRecord]
    total: int


class BaseJobProviderClient(ABC):
    """
    Abstract base class for job provider clients.

    Subclasses only describe how to build the request and how to map the
    provider's response; issuing the call and error handling live here.
    """

    name: str = ""
    display_name: str = ""
    currency: str = "$"
    default_keywords: str = DEFAULT_KEYWORDS
    default_location: str = DEFAULT_LOCATION

    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        session: requests.Session | None = None,
    ):
        """
        Initialize the provider client.

        Args:
            base_url: Base URL for the provider API
            timeout: Request timeout in seconds
            session: Optional pre-configured requests session, used by every
                thread. Without one each thread gets its own session, since a
                client is shared by request handlers and search workers.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session
        self._local = threading.local()
        self.logger = get_structured_logger(__name__, provider=self.name)

    @property
    def session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    @abstractmethod
    def _build_request(
        self, keywords: str, location: str, page: int, results_per_page: int
    ) -> ProviderRequest:
        """Translate a generic query into a provider-specific request."""

    @abstractmethod
    def _extract_items(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        """Return the raw result items from a provider response body."""

    @abstractmethod
    def _extract_total(self, data: dict[str, Any]) -> int:
        """Return the provider-reported result count."""

    @abstractmethod
    def _parse_job(self, item: dict[str, Any]) -> JobRecord:
        """Map one raw result item into a JobRecord."""

    def search(
        self,
        keywords: str | None = None,
        location: str | None = None,
        page: int = DEFAULT_PAGE,
        results_per_page: int = DEFAULT_RESULTS_PER_PAGE,
    ) -> ProviderSearchResult:
        """
        Search the provider for jobs.

        Args:
            keywords: Search keywords (provider default when empty)
            location: Search location (provider default when empty)
            page: Results page, 1-based
            results_per_page: Page size, where the provider supports it

        Returns:
            ProviderSearchResult with mapped jobs and the provider-reported total

        Raises:
            ProviderError: If the call fails or the response cannot be mapped
        """
        provider_request = self._build_request(
            keywords or self.default_keywords,
            location or self.default_location,
            page,
            results_per_page,
        )
        data = self._make_request(provider_request)

        try:
            jobs = [self._parse_job(item) for item in self._extract_items(data)]
            total = self._extract_total(data)
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            raise ProviderResponseError(
                self.display_name, f"Unexpected response shape: {e}", detail=str(e)
            ) from e

        self.logger.info(f"Mapped {len(jobs)} job(s), provider total {total}")
        return ProviderSearchResult(jobs=jobs, total=total)

    def _make_request(self, provider_request: ProviderRequest) -> dict[str, Any]:
        """
        Issue the provider call.

        Raises:
            ProviderRequestError: On transport failure, non-2xx status or invalid JSON
        """
        try:
            response = self.session.get(
                provider_request.url,
                params=provider_request.params,
                headers=provider_request.headers,
                auth=provider_request.auth,
                timeout=self.timeout,
            )
            self._log_request(provider_request, response.status_code)
            return self._handle_response(response)
        except requests.RequestException as e:
            detail = str(e)
            response = getattr(e, "response", None)
            if response is not None:
                detail = response.text[:500] or detail
                self.logger.error(f"Response status: {response.status_code}")
            raise ProviderRequestError(self.display_name, str(e), detail=detail) from e

    def _handle_response(self, response: requests.Response) -> dict[str, Any]:
        """
        Check the status and parse the JSON body.

        Raises:
            requests.RequestException: If response indicates an error or is not JSON
        """
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Failed to parse JSON response: {e}")
            raise requests.RequestException(f"Invalid JSON response: {e}", response=response)

        if not isinstance(data, dict):
            raise requests.RequestException(
                f"Expected a JSON object, got {type(data).__name__}", response=response
            )
        return data

    def _log_request(self, provider_request: ProviderRequest, status_code: int | None = None):
        """Log request details without credentials."""
        safe_params = {
            k: v for k, v in provider_request.params.items() if k not in SENSITIVE_PARAMS
        }
        self.logger.info(f"API request: {provider_request.url} with params: {safe_params}")
        if status_code:
            self.logger.debug(f"Response status: {status_code}")
