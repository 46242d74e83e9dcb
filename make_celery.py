# make_celery.py
# Creates the Flask application and exposes the configured Celery application
# instance for the worker:
#
#   celery -A make_celery.celery worker --loglevel=info

from app import create_app

flask_app = create_app()

# celery_init_app (called within create_app) stores the configured Celery
# instance in app.extensions["celery"].
celery = flask_app.extensions["celery"]
