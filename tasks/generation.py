from celery import shared_task
from extensions import db
from models.user import User
from services.errors import OperationError
from services.router import create_caller
import logging

logger = logging.getLogger(__name__)


@shared_task(bind=True, ignore_result=False)
def run_operation_task(self, operation: str, user_id: int, payload: dict = None):
    """
    Run a router operation in the background on behalf of a user.

    Args:
        operation: Router operation name (e.g. "createPost", "updatePost")
        user_id: ID of the acting user
        payload: Operation input dict

    Returns:
        The operation's result dict.
    """
    user = db.session.get(User, user_id)
    if not user:
        logger.error(f"User with ID {user_id} not found.")
        raise ValueError(f"User with ID {user_id} not found.")

    logger.info(
        f"Task {self.request.id}: running {operation} for user_id: {user_id}"
    )

    try:
        result = create_caller(user).call(operation, payload or {})
    except OperationError as e:
        # Typed failures are reported through the task state, not retried
        logger.warning(f"Task {self.request.id}: {operation} failed: {e.message}")
        raise

    logger.info(f"Task {self.request.id}: {operation} completed")
    return result
