"""
Root pytest configuration and shared fixtures.

This file contains configuration and fixtures shared across all test types.
Directory-specific conftest.py files can override or extend these fixtures.
"""

import sys
import time
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add the repo root to the Python path so "backend" and "services" import
# without an editable install
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


def make_http_response(status_code=200, json_data=None, text=""):
    """Build a Mock that behaves like a requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def http_response():
    """Factory fixture for fake provider HTTP responses."""
    return make_http_response


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch):
    """Run every test with UTC as the host timezone so posted dates are stable."""
    if not hasattr(time, "tzset"):
        yield
        return
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def adzuna_payload():
    """Adzuna search response with two jobs."""
    return {
        "count": 1234,
        "results": [
            {
                "id": "4012345678",
                "title": "Python Developer",
                "company": {"display_name": "Acme Ltd"},
                "location": {"display_name": "London, UK"},
                "salary_min": 45000,
                "salary_max": 60000.0,
                "description": "Build APIs in Python.",
                "redirect_url": "https://www.adzuna.co.uk/jobs/land/ad/4012345678",
                "created": "2024-03-05T09:30:00Z",
            },
            {
                "id": 4012345679,
                "title": "Data Engineer",
                "description": "Pipelines.",
                "redirect_url": "https://www.adzuna.co.uk/jobs/land/ad/4012345679",
                "created": "2024-03-04T12:00:00Z",
            },
        ],
    }


@pytest.fixture
def reed_payload():
    """Reed search response with two jobs."""
    return {
        "totalResults": 87,
        "results": [
            {
                "jobId": 51234567,
                "jobTitle": "Backend Engineer",
                "employerName": "Northwind",
                "locationName": "Manchester",
                "minimumSalary": 50000.0,
                "maximumSalary": None,
                "jobDescription": "Work on our platform.",
                "jobUrl": "https://www.reed.co.uk/jobs/backend-engineer/51234567",
                "date": "04/03/2024",
            },
            {
                "jobId": 51234568,
                "jobTitle": "Python Developer",
                "employerName": "Acme Ltd",
                "locationName": "London",
                "jobDescription": "Same job, listed on Reed.",
                "jobUrl": "https://www.reed.co.uk/jobs/python-developer/51234568",
                "date": "01/03/2024",
            },
        ],
    }


@pytest.fixture
def usajobs_payload():
    """USAJobs search response with one job."""
    return {
        "SearchResult": {
            "SearchResultCount": 1,
            "SearchResultItems": [
                {
                    "MatchedObjectId": "781234500",
                    "MatchedObjectDescriptor": {
                        "MatchedObjectId": "781234500",
                        "PositionTitle": "IT Specialist (APPSW)",
                        "OrganizationName": "Department of Veterans Affairs",
                        "PositionLocationDisplay": "Washington, District of Columbia",
                        "PositionRemuneration": [
                            {"MinimumRange": "99200.0", "MaximumRange": "128956.0"}
                        ],
                        "UserArea": {"Details": {"JobSummary": "Develop applications."}},
                        "ApplyURI": ["https://www.usajobs.gov/job/781234500/apply"],
                        "PositionURI": "https://www.usajobs.gov/job/781234500",
                        "PositionStartDate": "2024-03-01T00:00:00.0000",
                    },
                }
            ],
        }
    }
