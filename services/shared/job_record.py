"""
Unified Job Record

Single record shape returned by every provider client and by the fallback
generator, plus the salary and date formatting shared between them.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

UNTITLED_POSITION = "Untitled Position"
UNKNOWN_COMPANY = "Unknown Company"
LOCATION_NOT_SPECIFIED = "Location not specified"
SALARY_NOT_SPECIFIED = "Salary not specified"
NO_DESCRIPTION = "No description provided"
URL_NOT_AVAILABLE = "URL not available"
DATE_NOT_SPECIFIED = "Date not specified"

GBP = "£"
USD = "$"


@dataclass(frozen=True)
class JobRecord:
    """One job listing, fully populated."""

    id: str
    title: str
    company: str
    location: str
    salary: str
    description: str
    url: str
    posted: str
    source: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def build_job_record(
    *,
    id: Any,
    title: Any,
    company: Any,
    location: Any,
    salary: str,
    description: Any,
    url: Any,
    posted: str,
    source: str,
) -> JobRecord:
    """Build a JobRecord, replacing missing or blank values with placeholders.

    Args:
        id: Provider-native identifier (any type, stringified)
        title: Job title
        company: Employer name
        location: Display location
        salary: Already formatted salary string
        description: Job description
        url: Apply or redirect URL
        posted: Already formatted posted date
        source: Provider display name

    Returns:
        JobRecord where every field is a non-empty string
    """
    return JobRecord(
        id=_text(id) or f"{source.lower()}-unknown",
        title=_text(title) or UNTITLED_POSITION,
        company=_text(company) or UNKNOWN_COMPANY,
        location=_text(location) or LOCATION_NOT_SPECIFIED,
        salary=salary or SALARY_NOT_SPECIFIED,
        description=_text(description) or NO_DESCRIPTION,
        url=_text(url) or URL_NOT_AVAILABLE,
        posted=posted or DATE_NOT_SPECIFIED,
        source=source,
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _format_amount(value: Any) -> str:
    """Render a salary amount the way it reads on a job board.

    Integral floats and numeric strings lose their decimal part
    (30000.0 -> "30000"); anything non-numeric is kept as-is.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return str(value).strip()
    if number.is_integer():
        return str(int(number))
    return str(number)


def _has_amount(value: Any) -> bool:
    amount = _format_amount(value)
    if not amount:
        return False
    try:
        return float(amount) != 0
    except ValueError:
        return True


def format_salary(minimum: Any, maximum: Any, currency: str) -> str:
    """Format a salary range for display.

    Either bound may be missing, in which case its slot is left empty but
    the separator is kept ("£30000 - £").

    Args:
        minimum: Lower bound as reported by the provider
        maximum: Upper bound as reported by the provider
        currency: Currency symbol prefixed to both bounds

    Returns:
        Formatted range, or the salary placeholder when neither bound is set
    """
    if not _has_amount(minimum) and not _has_amount(maximum):
        return SALARY_NOT_SPECIFIED

    low = _format_amount(minimum) if _has_amount(minimum) else ""
    high = _format_amount(maximum) if _has_amount(maximum) else ""
    return f"{currency}{low} - {currency}{high}"


def format_posted_date(value: datetime) -> str:
    """Short date string, month/day/year without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def parse_posted_date(raw: Any, dayfirst: bool = False) -> str:
    """Parse a provider timestamp and format it as a short date.

    Args:
        raw: Timestamp string from the provider
        dayfirst: Treat ambiguous dates as DD/MM/YYYY

    Returns:
        Formatted date, or the date placeholder when missing or unparseable
    """
    if not raw:
        return DATE_NOT_SPECIFIED
    try:
        parsed = date_parser.parse(str(raw), dayfirst=dayfirst)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse posted date {raw!r}: {e}")
        return DATE_NOT_SPECIFIED
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return format_posted_date(parsed)
