"""
Shared building blocks used across services: the unified job record and
structured logging.
"""

from .job_record import (
    DATE_NOT_SPECIFIED,
    GBP,
    SALARY_NOT_SPECIFIED,
    UNKNOWN_COMPANY,
    USD,
    JobRecord,
    build_job_record,
    format_posted_date,
    format_salary,
    parse_posted_date,
)
from .structured_logging import StructuredLoggerAdapter, get_structured_logger

__all__ = [
    "DATE_NOT_SPECIFIED",
    "GBP",
    "SALARY_NOT_SPECIFIED",
    "UNKNOWN_COMPANY",
    "USD",
    "JobRecord",
    "StructuredLoggerAdapter",
    "build_job_record",
    "format_posted_date",
    "format_salary",
    "get_structured_logger",
    "parse_posted_date",
]
