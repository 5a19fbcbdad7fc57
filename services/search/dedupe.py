"""
Cross-provider deduplication.

Two listings are the same job when title and company match exactly
(case-sensitive). The first occurrence wins, so callers control precedence
through the order in which they concatenate provider results.
"""

from __future__ import annotations

from collections.abc import Iterable

from services.shared import JobRecord


def build_dedupe_key(job: JobRecord) -> tuple[str, str]:
    return (job.title, job.company)


def dedupe_jobs(jobs: Iterable[JobRecord]) -> list[JobRecord]:
    """Drop repeated (title, company) pairs, keeping order and first occurrences."""
    seen: set[tuple[str, str]] = set()
    unique: list[JobRecord] = []
    for job in jobs:
        key = build_dedupe_key(job)
        if key in seen:
            continue
        seen.add(key)
        unique.append(job)
    return unique
