from flask import Blueprint, current_app, jsonify

from backend.utils.services import provider_credentials
from services.health import build_health_report

system_bp = Blueprint("system", __name__)


@system_bp.route("/api/health")
def api_health():
    """Health check endpoint. Reports configured credentials, not provider reachability."""
    return jsonify(build_health_report(provider_credentials(current_app.config))), 200
