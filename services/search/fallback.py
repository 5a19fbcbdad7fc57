"""Placeholder job listings returned when a provider cannot be reached."""

from __future__ import annotations

from datetime import datetime, timedelta
from urllib.parse import quote

from services.shared import JobRecord, format_posted_date

FALLBACK_SOURCE = "Fallback"
FALLBACK_JOB_COUNT = 3

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def get_fallback_jobs(
    keywords: str | None,
    location: str | None,
    source: str | None,
    now: datetime | None = None,
) -> list[JobRecord]:
    """Build the fixed set of placeholder jobs for a failed search.

    Args:
        keywords: Search keywords as the caller sent them (may be empty)
        location: Search location as the caller sent it (may be empty)
        source: Label for the `source` field, e.g. the failing provider
        now: Reference time, defaults to the current local time

    Returns:
        Three JobRecords, posted today, one day ago and two days ago
    """
    now = now or datetime.now()
    stamp = int(now.timestamp() * 1000)
    title_kw = keywords or "Software"
    text_kw = keywords or "software"
    slug = _encode_uri_component(text_kw)
    label = source or FALLBACK_SOURCE

    return [
        JobRecord(
            id=f"1-{stamp}",
            title=f"{title_kw} Developer",
            company="Tech Innovations Inc.",
            location=location or "Remote",
            salary="$80,000 - $120,000",
            description=f"We are looking for a skilled {text_kw} developer to join our growing team.",
            url=f"https://www.example.com/jobs/{slug}-developer",
            posted=format_posted_date(now),
            source=label,
        ),
        JobRecord(
            id=f"2-{stamp}",
            title=f"Senior {title_kw} Engineer",
            company="Digital Solutions Ltd.",
            location=location or "New York, NY",
            salary="$120,000 - $160,000",
            description=f"Senior {text_kw} position with leadership responsibilities.",
            url=f"https://www.example.com/jobs/senior-{slug}",
            posted=format_posted_date(now - timedelta(days=1)),
            source=label,
        ),
        JobRecord(
            id=f"3-{stamp}",
            title=f"{title_kw} Specialist",
            company="Tech Corp",
            location=location or "San Francisco, CA",
            salary="$90,000 - $130,000",
            description=f"Join our team as a {text_kw} specialist.",
            url=f"https://www.example.com/jobs/{slug}-specialist",
            posted=format_posted_date(now - timedelta(days=2)),
            source=label,
        ),
    ]
