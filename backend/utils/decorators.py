import logging

from flask import Flask, jsonify, request

from services.rate_limiting import RateLimitExceeded

from .services import get_rate_limiter

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests"


def _client_key() -> str:
    return request.remote_addr or "unknown"


def _too_many_requests(error: RateLimitExceeded):
    response = jsonify({"error": RATE_LIMIT_MESSAGE})
    response.status_code = 429
    response.headers["Retry-After"] = get_rate_limiter().retry_after_header(error)
    return response


def install_rate_limit(app: Flask) -> None:
    """Rate limit every request by client IP before it reaches a view.

    Preflight requests and paths listed in RATE_LIMIT_EXEMPT_PATHS are not
    counted.
    """
    exempt_paths = set(app.config.get("RATE_LIMIT_EXEMPT_PATHS", ()))

    @app.before_request
    def enforce_rate_limit():
        if request.method == "OPTIONS" or request.path in exempt_paths:
            return None
        try:
            get_rate_limiter().consume(_client_key())
        except RateLimitExceeded as e:
            logger.warning(f"Rejected {request.method} {request.path} from {e.key}")
            return _too_many_requests(e)
        return None
