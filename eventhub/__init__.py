from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
import os
from eventhub.extensions import db, migrate, jwt, limiter, mail
from eventhub.exceptions import ApiError, ServerError
from datetime import timedelta
import logging

# Load environment variables
load_dotenv()


def create_app(config=None):
    """Build the application.

    Settings come from the environment (and ``.env``); ``config`` overrides
    them, which is how the test suite points the app at an in-memory database.
    """
    app = Flask(__name__)

    # Set testing mode from environment variable
    app.config["TESTING"] = os.getenv("FLASK_ENV") in ["development", "testing"]

    # Configure logging
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "sqlite:///eventhub.db"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["DB_POOL_SIZE"] = int(os.getenv("DB_POOL_SIZE", 10))

    # Configure JWT
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY", "your-secret-key")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(
        minutes=int(os.getenv("JWT_EXPIRES_MINUTES", 60))
    )
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"

    # Rate limiting
    app.config["RATELIMIT_DEFAULT"] = os.getenv(
        "RATELIMIT_DEFAULT", "150 per minute;10000 per hour"
    )
    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    app.config["RATELIMIT_STRATEGY"] = "fixed-window"
    app.config["RATELIMIT_ENABLED"] = os.getenv("RATELIMIT_ENABLED", "true").lower() in ["true", "1", "t"]

    # Email configuration
    app.config["MAIL_SERVER"] = os.getenv("MAIL_SERVER")
    app.config["MAIL_PORT"] = int(os.getenv("MAIL_PORT", 587))
    app.config["MAIL_USE_TLS"] = os.getenv("MAIL_USE_TLS", "true").lower() in ["true", "1", "t"]
    app.config["MAIL_USERNAME"] = os.getenv("MAIL_USERNAME")
    app.config["MAIL_PASSWORD"] = os.getenv("MAIL_PASSWORD")
    app.config["MAIL_DEFAULT_SENDER"] = os.getenv("MAIL_DEFAULT_SENDER")

    if config:
        app.config.update(config)

    # Bounded connection pool; SQLite picks its own pool class
    if not app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        app.config.setdefault(
            "SQLALCHEMY_ENGINE_OPTIONS",
            {
                "pool_size": app.config["DB_POOL_SIZE"],
                "max_overflow": 0,
                "pool_pre_ping": True,
            },
        )

    # Initialize Flask extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)
    mail.init_app(app)

    # Register blueprints
    from eventhub import auth  # noqa: F401  (registers the JWT error callbacks)
    from eventhub.routes.user_routes import user_bp
    from eventhub.routes.event_routes import event_bp
    from eventhub.routes.admin_routes import admin_bp
    from eventhub.routes.notification_routes import notification_bp

    app.register_blueprint(user_bp)
    app.register_blueprint(event_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(notification_bp)

    # Set up CORS
    cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={r"/*": {"origins": cors_origins}},
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        expose_headers=["Content-Type"],
    )

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        app.logger.exception(f"Unhandled error: {str(error)}")
        error = ServerError()
        return jsonify(error.to_dict()), error.status_code
