"""Credential-presence health report. Does not contact any provider."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any


def _is_configured(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def format_timestamp(now: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_health_report(credentials: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Report which providers have a credential configured.

    Args:
        credentials: Primary credential per provider name
        now: Report time, defaults to the current UTC time

    Returns:
        {"status": "OK", "timestamp": ..., "services": {provider: bool}}
    """
    now = now or datetime.now(UTC)
    return {
        "status": "OK",
        "timestamp": format_timestamp(now),
        "services": {
            "adzuna": _is_configured(credentials.get("adzuna")),
            "reed": _is_configured(credentials.get("reed")),
            "usajobs": _is_configured(credentials.get("usajobs")),
        },
    }
