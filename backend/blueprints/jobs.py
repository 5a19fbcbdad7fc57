import logging

from flask import Blueprint, jsonify, request

from backend.utils.services import get_job_search_service
from services.providers.base_client import DEFAULT_PAGE, DEFAULT_RESULTS_PER_PAGE
from services.search import get_fallback_jobs

logger = logging.getLogger(__name__)
jobs_bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")

COMBINED_FALLBACK_SOURCE = "Multiple Sources"


def _fallback_response(error: str, keywords: str | None, location: str | None, source: str):
    jobs = get_fallback_jobs(keywords, location, source)
    return jsonify(
        {
            "success": False,
            "error": error,
            "jobs": [job.to_dict() for job in jobs],
        }
    ), 500


@jobs_bp.route("/search", methods=["GET"])
def api_search_jobs():
    """Combined search across the providers listed in `sources`."""
    keywords = request.args.get("keywords")
    location = request.args.get("location")
    try:
        outcome = get_job_search_service().search_all(
            keywords=keywords,
            location=location,
            sources=request.args.get("sources"),
        )
        return jsonify(outcome.to_dict()), 200
    except Exception as e:
        logger.error(f"Combined search error: {e}", exc_info=True)
        return _fallback_response("Search failed", keywords, location, COMBINED_FALLBACK_SOURCE)


@jobs_bp.route("/<any(adzuna, reed, usajobs):provider>", methods=["GET"])
def api_search_provider(provider: str):
    """Search a single provider. Answers 500 with fallback jobs when it fails."""
    keywords = request.args.get("keywords")
    location = request.args.get("location")
    service = get_job_search_service()
    client = service.get_client(provider)
    try:
        outcome = service.search_provider(
            provider,
            keywords=keywords,
            location=location,
            page=request.args.get("page", default=DEFAULT_PAGE, type=int),
            results_per_page=request.args.get(
                "resultsPerPage", default=DEFAULT_RESULTS_PER_PAGE, type=int
            ),
        )
    except Exception as e:
        logger.error(f"Unexpected error searching {provider}: {e}", exc_info=True)
        return _fallback_response(
            f"Failed to fetch jobs from {client.display_name}",
            keywords,
            location,
            client.display_name,
        )

    return jsonify(outcome.to_dict()), 200 if outcome.success else 500
