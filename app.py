import logging
import sys
import click

# Configure logging to output to STDOUT with a more detailed format
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from flask import Flask, jsonify, redirect, request, url_for
from celery import Celery
from celery import Task as CeleryTask

from extensions import db, login_manager, migrate
from models import User
from cli import init_db, create_user, list_operations
from config import Config

# Import blueprints from views package
from views.main import bp as main_bp
from views.api import bp as api_bp
from views.auth import bp as auth_bp


def celery_init_app(app: Flask) -> Celery:
    """Create and configure a new Celery instance, integrated with Flask."""

    class FlaskTask(CeleryTask):
        def __call__(self, *args: object, **kwargs: object) -> object:
            with app.app_context():
                return self.run(*args, **kwargs)

    celery_app = Celery(
        app.name,
        task_cls=FlaskTask,
        include=["tasks.generation"],
    )
    celery_app.config_from_object(app.config["CELERY"])
    celery_app.set_default()  # Make this the default Celery app for @shared_task
    app.extensions["celery"] = celery_app

    return celery_app


def create_app(config_overrides=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration from config.py
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    celery_init_app(app)

    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if not db_uri:
        app.logger.warning("SQLALCHEMY_DATABASE_URI is not configured.")
    elif "postgres" in db_uri:
        # Avoid logging sensitive parts of the URI if present
        uri_to_log = db_uri.split("@")[-1] if "@" in db_uri else db_uri
        app.logger.info(f"Using PostgreSQL database: {uri_to_log}")
    elif "sqlite" in db_uri:
        app.logger.info(f"Using SQLite database: {db_uri}")
    else:
        uri_scheme = db_uri.split(":")[0] if ":" in db_uri else "Unknown"
        app.logger.info(f"Using {uri_scheme} database.")

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    @login_manager.user_loader
    def load_user(user_id):
        """Load user by ID."""
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        """Answer API calls with JSON; send browsers to the login page."""
        if request.blueprint == "api":
            return jsonify({"error": "Authentication required", "code": "UNAUTHORIZED"}), 401
        return redirect(url_for("auth.login", next=request.path))

    # Register blueprints
    app.register_blueprint(main_bp)  # Presentation form
    app.register_blueprint(api_bp, url_prefix="/api")  # API routes
    app.register_blueprint(auth_bp, url_prefix="/auth")  # Auth routes

    # Register CLI commands
    app.cli.add_command(init_db)
    app.cli.add_command(create_user)
    app.cli.add_command(list_operations)

    @app.cli.command("worker")
    @click.option(
        "--loglevel", default="info", help="Log level (debug/info/warning/error)"
    )
    def worker(loglevel):
        """Run the Celery worker."""
        app.extensions["celery"].worker_main(["worker", f"--loglevel={loglevel}"])

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(debug=True, host="0.0.0.0", port=5001)
