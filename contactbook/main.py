"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import settings
from .db import EXTENSION_KEY, Database
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ContactBookError,
    DuplicateKeyError,
    ResourceNotFound,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Exception class -> HTTP status. Subclasses listed before ContactBookError.
ERROR_STATUS = {
    ValidationError: 400,
    DuplicateKeyError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    ResourceNotFound: 404,
    ContactBookError: 500,
}


def _error_body(error_type: str, message: str, details: dict | None = None) -> dict:
    response = {
        "error": {
            "type": error_type,
            "message": message
        }
    }
    if details:
        response["error"]["details"] = details
    return response


# Error handlers
def handle_contactbook_error(error: ContactBookError):
    """Render any ContactBookError with the status mapped to its class."""
    status = next(
        code for cls, code in ERROR_STATUS.items() if isinstance(error, cls)
    )
    if status >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message}")
    return jsonify(_error_body(error.__class__.__name__, error.message, error.details)), status


def handle_http_error(error: HTTPException):
    """Render werkzeug HTTP errors (unknown route, wrong method) as JSON."""
    return jsonify(_error_body(error.__class__.__name__, error.description)), error.code


def handle_internal_error(error: Exception):
    """Handle anything unexpected with a generic 500."""
    logger.exception(f"Internal error: {error}")
    return jsonify(_error_body("InternalServerError", "Internal server error")), 500


def initialize_database(database: Database) -> None:
    """Apply the schema on startup.

    A failure is logged and startup continues; requests that need the
    store will then fail with 500.
    """
    try:
        database.init()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")


def create_app(database: Database | None = None) -> Flask:
    """
    Build the Flask application.

    Args:
        database: Store handle to serve from. Defaults to a Database at
            settings.database_path.

    Returns:
        Configured Flask app with the auth and contacts blueprints mounted
        under settings.api_prefix
    """
    if database is None:
        database = Database(settings.database_path)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = database

    # CORS configuration
    CORS(app, origins=settings.cors_origins)

    initialize_database(database)

    app.register_error_handler(ContactBookError, handle_contactbook_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_internal_error)

    # Health check endpoint
    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    # Register API blueprints
    from .api.contacts import contacts_bp
    from .auth.api import auth_bp

    app.register_blueprint(auth_bp, url_prefix=settings.api_prefix)
    app.register_blueprint(
        contacts_bp,
        url_prefix=f"{settings.api_prefix}/contacts"
    )

    return app


def run():
    """Console entry point: serve on settings.host:settings.port."""
    app = create_app()
    logger.info(f"Server starting on {settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
