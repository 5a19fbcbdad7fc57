from .health_reporter import build_health_report, format_timestamp

__all__ = ["build_health_report", "format_timestamp"]
