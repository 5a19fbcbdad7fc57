import logging

from flask import Flask
from flask_cors import CORS

from backend.blueprints.jobs import jobs_bp
from backend.blueprints.system import system_bp
from backend.config import Config
from backend.utils.decorators import install_rate_limit
from backend.utils.errors import register_error_handlers
from backend.utils.services import (
    JOB_SEARCH_SERVICE_KEY,
    RATE_LIMITER_KEY,
    build_job_search_service,
    build_rate_limiter,
)
from services.rate_limiting import RateLimiter
from services.search import JobSearchService

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    config_object: object = Config,
    job_search_service: JobSearchService | None = None,
    rate_limiter: RateLimiter | None = None,
) -> Flask:
    """Application factory function.

    Args:
        config_object: Object whose upper-case attributes become app config
        job_search_service: Search service to use instead of building one from config
        rate_limiter: Rate limiter to use instead of building one from config
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize CORS
    CORS(app, origins=app.config["CORS_ORIGINS"])

    # Long-lived collaborators, built once and shared by every request
    app.extensions[JOB_SEARCH_SERVICE_KEY] = job_search_service or build_job_search_service(
        app.config
    )
    app.extensions[RATE_LIMITER_KEY] = rate_limiter or build_rate_limiter(app.config)

    install_rate_limit(app)
    register_error_handlers(app)

    # Register Blueprints
    app.register_blueprint(jobs_bp)
    app.register_blueprint(system_bp)

    return app


def main() -> None:
    app = create_app()
    port = app.config["PORT"]
    debug = app.config["ENVIRONMENT"] == "development"
    logger.info(f"Backend server running on port {port}")
    logger.info(f"Health check: http://localhost:{port}/api/health")
    app.run(host="0.0.0.0", port=port, debug=debug, use_reloader=debug, threaded=True)


if __name__ == "__main__":
    main()
