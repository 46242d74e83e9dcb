import os
from datetime import timedelta
import logging
import ssl

config_logger = logging.getLogger(__name__)


class Config:
    """Base configuration class."""

    # Flask configuration
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-key-please-change")

    # Database configuration
    # Construct default SQLite path relative to this config file's directory
    _DEFAULT_SQLITE_PATH = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), "content_assistant.db"
    )
    _DEFAULT_SQLALCHEMY_DATABASE_URI = "sqlite:///" + _DEFAULT_SQLITE_PATH

    database_url_env = os.environ.get("DATABASE_URL")
    if database_url_env:
        if database_url_env.startswith("postgres://"):
            # Handle Heroku-style 'postgres://' prefix
            SQLALCHEMY_DATABASE_URI = database_url_env.replace(
                "postgres://", "postgresql://", 1
            )
        else:
            SQLALCHEMY_DATABASE_URI = database_url_env
    else:
        SQLALCHEMY_DATABASE_URI = _DEFAULT_SQLALCHEMY_DATABASE_URI

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Celery Configuration Dictionary
    # Following the pattern from https://flask.palletsprojects.com/en/stable/patterns/celery/
    REDIS_URL_DEFAULT = "redis://localhost:6379/0"
    REDIS_URL = os.environ.get("REDIS_URL", REDIS_URL_DEFAULT)

    CELERY_BROKER_SSL_CONFIG = None
    CELERY_BACKEND_SSL_CONFIG = {}
    if REDIS_URL and REDIS_URL.startswith("rediss://"):
        if "?" not in REDIS_URL:
            REDIS_URL += "?ssl_cert_reqs=none"
        else:
            REDIS_URL += "&ssl_cert_reqs=none"
        common_ssl_params = {"ssl_cert_reqs": ssl.CERT_NONE}
        CELERY_BROKER_SSL_CONFIG = common_ssl_params
        CELERY_BACKEND_SSL_CONFIG = common_ssl_params

    CELERY = dict(
        broker_url=REDIS_URL,
        result_backend=REDIS_URL,
        broker_use_ssl=CELERY_BROKER_SSL_CONFIG,
        redis_backend_settings=CELERY_BACKEND_SSL_CONFIG,
        task_ignore_result=False,  # Generation results are polled by the API
        result_extended=True,  # Stores task kwargs so polling can check the owner
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        enable_utc=True,
        task_track_started=True,
        task_time_limit=300,
        worker_max_tasks_per_child=200,
        worker_prefetch_multiplier=1,
        broker_connection_retry_on_startup=True,
    )

    # AI backends
    GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")
    GEMINI_MODEL_NAME = os.environ.get("GEMINI_MODEL_NAME", "gemini-1.5-pro")

    DEEPSEEK_API_KEY = os.environ.get("DEEPSEEK_API_KEY")
    DEEPSEEK_BASE_URL = os.environ.get("DEEPSEEK_BASE_URL", "https://api.deepseek.com")
    DEEPSEEK_MODEL_NAME = os.environ.get("DEEPSEEK_MODEL_NAME", "deepseek-chat")

    AI_TEMPERATURE = float(os.environ.get("AI_TEMPERATURE", 0.7))

    # Session configuration
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)


# Log information about the configured AI backends.
# This runs when the config module is first imported.
if not Config.GEMINI_API_KEY:
    config_logger.warning(
        "Configuration: GEMINI_API_KEY is not set; the gemini backend will be unavailable."
    )
if not Config.DEEPSEEK_API_KEY:
    config_logger.warning(
        "Configuration: DEEPSEEK_API_KEY is not set; the deepseek backend will be unavailable."
    )
