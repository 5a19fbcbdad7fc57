import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def _sanitize_error_message(error: Exception) -> str:
    """Sanitize error messages to avoid leaking sensitive information.

    Args:
        error: Exception object

    Returns:
        Sanitized error message safe for client display
    """
    error_str = str(error).lower()

    # Remove potential file paths
    if "/" in str(error) or "\\" in str(error):
        return "Request could not be completed. Please try again later."

    # Remove API keys
    if ("api" in error_str or "app" in error_str) and ("key" in error_str or "id" in error_str):
        return "Provider authentication failed. Please check configuration."

    # Generic fallback for unknown errors
    return "An unexpected error occurred. Please try again later."


def register_error_handlers(app: Flask) -> None:
    """Answer framework-level errors with JSON bodies."""

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith("/api/"):
            return jsonify({"error": "API endpoint not found"}), 404
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        logger.error(f"Unhandled error on {request.path}: {error}", exc_info=True)
        return jsonify({"error": _sanitize_error_message(error)}), 500
