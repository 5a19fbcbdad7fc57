"""
Unit tests for JobSearchService.

Covers:
- Single-provider success and fallback
- Combined search ordering, deduplication and totals
- Provider failure isolation in combined search
"""

import threading
from unittest.mock import Mock

import pytest

from services.providers import ProviderRequestError, ProviderSearchResult
from services.search import JobSearchService, UnknownProviderError, parse_sources
from services.shared import JobRecord

DISPLAY_NAMES = {"adzuna": "Adzuna", "reed": "Reed", "usajobs": "USAJobs"}


def make_job(title, company, source, job_id=None):
    return JobRecord(
        id=job_id or f"{source}-{title}",
        title=title,
        company=company,
        location="London",
        salary="Salary not specified",
        description="desc",
        url="https://example.com",
        posted="3/1/2024",
        source=source,
    )


def make_client(name, jobs=None, total=None, error=None):
    client = Mock()
    client.name = name
    client.display_name = DISPLAY_NAMES[name]
    if error is not None:
        client.search.side_effect = error
    else:
        jobs = jobs or []
        client.search.return_value = ProviderSearchResult(
            jobs=jobs, total=len(jobs) if total is None else total
        )
    return client


@pytest.fixture
def clients():
    return {
        "adzuna": make_client(
            "adzuna",
            [make_job("Python Developer", "Acme", "Adzuna"), make_job("SRE", "Globex", "Adzuna")],
            total=500,
        ),
        "reed": make_client(
            "reed",
            [make_job("Python Developer", "Acme", "Reed"), make_job("QA", "Initech", "Reed")],
        ),
        "usajobs": make_client("usajobs", [make_job("SRE", "Globex", "USAJobs")]),
    }


@pytest.fixture
def service(clients):
    return JobSearchService(clients=clients)


class TestSearchProvider:
    def test_success_returns_jobs_and_provider_total(self, service, clients):
        outcome = service.search_provider("adzuna", keywords="python", location="leeds", page=3)

        assert outcome.success is True
        assert outcome.total == 500
        assert len(outcome.jobs) == 2
        clients["adzuna"].search.assert_called_once_with(
            keywords="python", location="leeds", page=3, results_per_page=20
        )
        payload = outcome.to_dict()
        assert payload["success"] is True
        assert payload["total"] == 500
        assert "error" not in payload

    def test_provider_error_returns_fallback(self, clients):
        clients["reed"] = make_client(
            "reed", error=ProviderRequestError("Reed", "401 Client Error", detail="Unauthorized")
        )
        service = JobSearchService(clients=clients)

        outcome = service.search_provider("reed", keywords="data", location="Berlin")

        assert outcome.success is False
        assert outcome.error == "Failed to fetch jobs from Reed"
        assert len(outcome.jobs) == 3
        assert all(job.source == "Reed" for job in outcome.jobs)
        assert all(job.location == "Berlin" for job in outcome.jobs)
        payload = outcome.to_dict()
        assert "total" not in payload
        assert len(payload["jobs"]) == 3

    def test_upstream_detail_is_logged_not_returned(self, clients, caplog):
        clients["adzuna"] = make_client(
            "adzuna", error=ProviderRequestError("Adzuna", "boom", detail="secret upstream body")
        )
        service = JobSearchService(clients=clients)

        outcome = service.search_provider("adzuna")

        assert "secret upstream body" in caplog.text
        assert "secret upstream body" not in str(outcome.to_dict())

    def test_unknown_provider(self, service):
        with pytest.raises(UnknownProviderError):
            service.search_provider("monster")

    def test_requires_clients(self):
        with pytest.raises(ValueError, match="At least one provider client"):
            JobSearchService(clients={})


class TestSearchAll:
    def test_merges_in_provider_order_and_dedupes(self, service):
        outcome = service.search_all(keywords="python", location="london")

        titles = [(job.title, job.company, job.source) for job in outcome.jobs]
        assert titles == [
            ("Python Developer", "Acme", "Adzuna"),
            ("SRE", "Globex", "Adzuna"),
            ("QA", "Initech", "Reed"),
        ]
        assert outcome.total == len(outcome.jobs) == 3
        assert outcome.sources == ["adzuna", "reed", "usajobs"]

    def test_order_ignores_requested_order(self, service):
        outcome = service.search_all(sources="usajobs,reed")

        assert [job.source for job in outcome.jobs] == ["Reed", "Reed", "USAJobs"]
        assert outcome.sources == ["usajobs", "reed"]

    def test_only_selected_providers_are_called(self, service, clients):
        service.search_all(keywords="qa", location="york", sources="reed")

        clients["reed"].search.assert_called_once_with(
            keywords="qa", location="york", page=1, results_per_page=20
        )
        clients["adzuna"].search.assert_not_called()
        clients["usajobs"].search.assert_not_called()

    def test_unknown_sources_are_echoed_but_select_nothing(self, service):
        outcome = service.search_all(sources="monster, ,indeed")

        assert outcome.jobs == []
        assert outcome.to_dict() == {
            "success": True,
            "jobs": [],
            "total": 0,
            "sources": ["monster", "indeed"],
        }

    def test_failed_provider_contributes_fallback_jobs(self, clients):
        clients["adzuna"] = make_client(
            "adzuna", error=ProviderRequestError("Adzuna", "down", detail="down")
        )
        service = JobSearchService(clients=clients)

        outcome = service.search_all(keywords="data", location="Berlin")

        assert [job.source for job in outcome.jobs[:3]] == ["Adzuna"] * 3
        assert outcome.total == len(outcome.jobs)

    def test_all_providers_failing_leaves_first_fallback_set(self):
        clients = {
            name: make_client(name, error=ProviderRequestError(label, "down", detail="down"))
            for name, label in DISPLAY_NAMES.items()
        }
        service = JobSearchService(clients=clients)

        outcome = service.search_all(keywords="data", location="Berlin")

        assert outcome.total == 3
        assert {job.source for job in outcome.jobs} == {"Adzuna"}
        assert outcome.to_dict()["success"] is True

    def test_unexpected_exception_contributes_nothing(self, clients):
        clients["reed"] = make_client("reed", error=RuntimeError("bug"))
        service = JobSearchService(clients=clients)

        outcome = service.search_all()

        assert [job.source for job in outcome.jobs] == ["Adzuna", "Adzuna"]

    def test_providers_run_concurrently(self, clients):
        """Each provider blocks until all three have started."""
        barrier = threading.Barrier(3, timeout=5)

        def wait_then_return(**kwargs):
            barrier.wait()
            return ProviderSearchResult(jobs=[], total=0)

        for client in clients.values():
            client.search.side_effect = wait_then_return
        service = JobSearchService(clients=clients)

        outcome = service.search_all()

        assert outcome.total == 0
        assert all(client.search.call_count == 1 for client in clients.values())


class TestParseSources:
    def test_default_is_all_providers(self):
        assert parse_sources(None) == ["adzuna", "reed", "usajobs"]

    def test_strips_whitespace(self):
        assert parse_sources(" reed , adzuna") == ["reed", "adzuna"]

    def test_empty_string_selects_nothing(self):
        assert parse_sources("") == []
